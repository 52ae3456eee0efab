import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional

import serial

from sensor_core.models.sensor_data import SensorSample
from sensor_core.models.sensor_enum import SensorKind

logger = logging.getLogger(__name__)

RECONNECT_DELAY = 1.0  # seconds between attempts to reopen the port

SampleSink = Callable[[SensorSample], None]


def parse_sample_line(line: str) -> SensorSample:
    """
    Parse one line of the sensor line protocol.

        ACC 0.02 -0.11 9.79
        ACCELEROMETER 1712345678.25 0.02 -0.11 9.79

    The first token is a kind name or alias. With one number more than the
    kind's component count, the first number is the sample timestamp.
    """
    parts = line.split()
    if not parts:
        raise ValueError("Empty line")

    kind = SensorKind.from_name(parts[0])
    try:
        numbers = [float(p) for p in parts[1:]]
    except ValueError:
        raise ValueError(f"Non numeric value in line: {line!r}")

    expected = kind.component_count()
    if len(numbers) == expected:
        return SensorSample.from_values(kind, numbers, time.time())
    if len(numbers) == expected + 1:
        return SensorSample.from_values(kind, numbers[1:], numbers[0])
    raise ValueError(f"{kind.name} expects {expected} values (optionally preceded by a timestamp), got {len(numbers)}")


def make_serial_read_func(port: str, baudrate: int, submit: SampleSink) -> Callable[[], Awaitable[Optional[SensorSample]]]:
    """
    Returns an async function that reads one line from the serial port and
    hands the parsed sample to `submit`.
    The function returns the sample if one was read, or None if not.
    Closes and reopens the port on I/O errors; logs once on disconnect and
    once on reconnect.
    """
    ser = None
    connected = False

    def _close():
        nonlocal ser
        if ser is not None:
            try:
                ser.close()
            except (serial.SerialException, OSError):
                pass
            ser = None

    async def read_func():
        nonlocal ser, connected
        try:
            if ser is None:
                ser = serial.Serial(port, baudrate, timeout=0.1)
                if not connected:
                    logger.warning(f"[Serial] sensor feed connected on {port} @ {baudrate} baud")
                    connected = True
            if ser.in_waiting > 0:
                try:
                    line = ser.readline().decode('utf-8').strip()
                except UnicodeDecodeError:
                    logger.warning(f"Error decoding serial data from {port}")
                    return None
                if line:
                    try:
                        sample = parse_sample_line(line)
                    except ValueError as e:
                        logger.warning(f"Error parsing line: {line} -> {e}")
                        return None
                    submit(sample)
                    return sample
            await asyncio.sleep(0.01)
            return None
        except (serial.SerialException, OSError) as e:
            if connected:
                logger.warning(f"[Serial] sensor feed disconnected from {port}: {e}")
                connected = False
            _close()
            await asyncio.sleep(RECONNECT_DELAY)
            return None

    read_func.close = _close
    return read_func


async def serial_reader(port: str, baudrate: int, submit: SampleSink):
    """Read samples from the serial port until cancelled."""
    read_func = make_serial_read_func(port, baudrate, submit)
    logger.info(f"Serial reader started on {port}")
    try:
        while True:
            await read_func()
            # readline does not suspend; yield so queued lines cannot starve the loop
            await asyncio.sleep(0)
    except asyncio.CancelledError:
        logger.info(f"Serial reader on {port} stopped")
        raise
    finally:
        read_func.close()
