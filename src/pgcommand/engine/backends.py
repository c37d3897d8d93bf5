"""Execution backend implementations.

Concrete implementations of the CommandExecutor and AsyncCommandExecutor
protocols. Both capture stdout and stderr, decode them lossily and turn
spawn failures and timeouts into typed errors. Neither interprets the exit
status; that is left to the command descriptors.
"""

import asyncio
import logging
import subprocess
import time
from datetime import timedelta

from pgcommand.engine.invocation import Invocation
from pgcommand.engine.protocols import (
    AsyncCommandExecutor,
    CommandExecutor,
    CommandOutput,
    Timeout,
)
from pgcommand.exceptions import CommandTimeoutError, SpawnError

logger = logging.getLogger(__name__)

_READ_CHUNK_SIZE = 64 * 1024


def normalize_timeout(timeout: Timeout) -> float | None:
    """Convert a timeout to seconds."""
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return timeout


def decode_output(data: bytes | str | None, encoding: str = "utf-8") -> str:
    """Decode captured output, replacing invalid byte sequences."""
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return data.decode(encoding, errors="replace")


class SubprocessExecutor(CommandExecutor):
    """Execute invocations with subprocess.run, blocking the caller."""

    def __init__(self, encoding: str = "utf-8", default_timeout: float | None = None) -> None:
        """Initialize executor.

        Args:
            encoding: Encoding used to decode captured output
            default_timeout: Seconds to wait when run() gets no timeout
        """
        self.encoding = encoding
        self.default_timeout = default_timeout

    def run(self, invocation: Invocation, timeout: Timeout = None) -> CommandOutput:
        """Execute an invocation and wait for it to exit."""
        seconds = normalize_timeout(timeout)
        if seconds is None:
            seconds = self.default_timeout

        logger.debug("Running %s", invocation.to_command_string(redact=True))
        start_time = time.monotonic()

        try:
            result = subprocess.run(
                invocation.command_line(),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                cwd=invocation.cwd,
                env=invocation.process_env(),
                timeout=seconds,
            )
        except subprocess.TimeoutExpired as e:
            # subprocess.run has already killed and reaped the child
            logger.warning("%s timed out after %ss", invocation.program, seconds)
            raise CommandTimeoutError(
                invocation.program,
                seconds,
                stdout=decode_output(e.stdout, self.encoding),
                stderr=decode_output(e.stderr, self.encoding),
            ) from e
        except OSError as e:
            logger.warning("Failed to start %s: %s", invocation.program_file, e)
            raise SpawnError(invocation.program, e) from e

        duration = time.monotonic() - start_time
        logger.debug("%s exited with %s in %.3fs", invocation.program, result.returncode, duration)

        return CommandOutput(
            program=invocation.program,
            exit_code=result.returncode,
            stdout=decode_output(result.stdout, self.encoding),
            stderr=decode_output(result.stderr, self.encoding),
            duration_seconds=duration,
        )


async def _drain(stream: asyncio.StreamReader | None, buffer: bytearray) -> None:
    """Read a stream to EOF into buffer, so partial output survives a cancel."""
    if stream is None:
        return
    while True:
        chunk = await stream.read(_READ_CHUNK_SIZE)
        if not chunk:
            return
        buffer.extend(chunk)


async def _communicate(
    process: asyncio.subprocess.Process, stdout: bytearray, stderr: bytearray
) -> int:
    await asyncio.gather(_drain(process.stdout, stdout), _drain(process.stderr, stderr))
    return await process.wait()


async def _kill(process: asyncio.subprocess.Process) -> None:
    """Kill the process if still running and reap it."""
    if process.returncode is None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
    await process.wait()


class AsyncioExecutor(AsyncCommandExecutor):
    """Execute invocations with asyncio subprocesses.

    On timeout or cancellation the child process is killed, never just
    abandoned.
    """

    def __init__(self, encoding: str = "utf-8", default_timeout: float | None = None) -> None:
        self.encoding = encoding
        self.default_timeout = default_timeout

    async def run(self, invocation: Invocation, timeout: Timeout = None) -> CommandOutput:
        """Execute an invocation, suspending until exit or timeout."""
        seconds = normalize_timeout(timeout)
        if seconds is None:
            seconds = self.default_timeout

        logger.debug("Running %s", invocation.to_command_string(redact=True))
        start_time = time.monotonic()

        try:
            process = await asyncio.create_subprocess_exec(
                *invocation.command_line(),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=invocation.cwd,
                env=invocation.process_env(),
            )
        except OSError as e:
            logger.warning("Failed to start %s: %s", invocation.program_file, e)
            raise SpawnError(invocation.program, e) from e

        stdout = bytearray()
        stderr = bytearray()
        try:
            exit_code = await asyncio.wait_for(
                _communicate(process, stdout, stderr), timeout=seconds
            )
        except asyncio.TimeoutError:
            await _kill(process)
            logger.warning(
                "%s (pid %s) timed out after %ss and was killed",
                invocation.program,
                process.pid,
                seconds,
            )
            raise CommandTimeoutError(
                invocation.program,
                seconds,
                stdout=decode_output(bytes(stdout), self.encoding),
                stderr=decode_output(bytes(stderr), self.encoding),
                pid=process.pid,
            ) from None
        except asyncio.CancelledError:
            await _kill(process)
            raise

        duration = time.monotonic() - start_time
        logger.debug("%s exited with %s in %.3fs", invocation.program, exit_code, duration)

        return CommandOutput(
            program=invocation.program,
            exit_code=exit_code,
            stdout=decode_output(bytes(stdout), self.encoding),
            stderr=decode_output(bytes(stderr), self.encoding),
            duration_seconds=duration,
        )
