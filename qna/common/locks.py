"""
Async Read/Write Lock

A reader/writer lock for coroutines sharing one in-process container.
Any number of readers may hold the lock at once; a writer holds it
alone. Once a writer is waiting, new readers queue behind it so a steady
stream of reads cannot starve writes.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

__all__ = ['AsyncRWLock']


class AsyncRWLock:
    """Reader/writer lock built on a single asyncio.Condition."""

    def __init__(self):
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def locked(self) -> bool:
        """True while a writer holds the lock."""
        return self._writer

    async def acquire_read(self) -> None:
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and self._waiting_writers == 0
            )
            self._readers += 1

    async def release_read(self) -> None:
        async with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    async def acquire_write(self) -> None:
        async with self._cond:
            self._waiting_writers += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer and self._readers == 0
                )
            except BaseException:
                # readers may have been held back by this writer
                self._waiting_writers -= 1
                self._cond.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True

    async def release_write(self) -> None:
        async with self._cond:
            self._writer = False
            self._cond.notify_all()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        await self.acquire_read()
        try:
            yield
        finally:
            await self.release_read()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Hold the lock in exclusive mode for the duration of the block."""
        await self.acquire_write()
        try:
            yield
        finally:
            await self.release_write()
