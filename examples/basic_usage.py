#!/usr/bin/env python3
"""Basic usage example"""

import asyncio

from minilog import LoggerBuilder, LogLevel, MemoryTransport, TimestampedFormatter


async def ship(entry, text):
    # Stand-in for a network call
    await asyncio.sleep(0)
    print(f"shipped: {text}")


async def main():
    memory = MemoryTransport()

    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_level(LogLevel.DEBUG)
        .with_context("example")
        .with_console(formatter=TimestampedFormatter())
        .with_memory(memory)
        .with_callback(ship)
        .build())

    # Log messages
    logger.trace("This is trace")
    logger.debug("This is debug")
    logger.info("Application started", data={"pid": 1234})
    logger.warn("This is warning")

    try:
        1 / 0
    except ZeroDivisionError as e:
        logger.error_with_exception("Division failed", e)

    db = logger.child("db")
    db.info("Connected")

    # Wait for the async callback, then release transports
    await logger.flush()
    await logger.close()

    print(f"{len(memory.entries)} entries captured, "
          f"{len(memory.get_entries(LogLevel.ERROR))} error(s)")

if __name__ == "__main__":
    asyncio.run(main())
