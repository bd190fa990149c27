"""Producers and consumers sharing a bounded buffer."""

from __future__ import annotations

import random
import re
import sys
import threading
import time
from collections import deque
from dataclasses import dataclass

DEFAULT_BUFFER_SIZE = 10
DEFAULT_NUM_PRODUCERS = 2
DEFAULT_NUM_CONSUMERS = 2
DEFAULT_ITEMS_PER_PRODUCER = 5
PROGRAM_NAME = "producer_consumer"

_CONSUMER_TIMEOUT = 0.2
_MIN_TIMEOUT = 0.01
_INTEGER = re.compile(r"\s*[+-]?\d+")


@dataclass(frozen=True)
class SimulationConfig:
    producers: int = DEFAULT_NUM_PRODUCERS
    consumers: int = DEFAULT_NUM_CONSUMERS
    items_per_producer: int = DEFAULT_ITEMS_PER_PRODUCER
    buffer_size: int = DEFAULT_BUFFER_SIZE

    @property
    def expected_items(self) -> int:
        return self.producers * self.items_per_producer


@dataclass(frozen=True)
class SimulationResult:
    items_produced: int
    expected_items: int
    remaining: int
    consumed: tuple[int, ...]


_print_lock = threading.Lock()


def _say(message: str) -> None:
    with _print_lock:
        print(message, flush=True)


def _usage() -> str:
    name = PROGRAM_NAME
    return (
        f"Usage: {name} [num_producers] [num_consumers] [items_per_producer] [buffer_size]\n"
        "Parameters:\n"
        f"  num_producers     : Number of producer threads (default: {DEFAULT_NUM_PRODUCERS})\n"
        f"  num_consumers     : Number of consumer threads (default: {DEFAULT_NUM_CONSUMERS})\n"
        f"  items_per_producer: Items each producer will create (default: {DEFAULT_ITEMS_PER_PRODUCER})\n"
        f"  buffer_size       : Maximum buffer size (default: {DEFAULT_BUFFER_SIZE})\n"
        "\nExamples:\n"
        f"  {name} 3 4 10 15          # 3 producers, 4 consumers, 10 items each, buffer size 15"
    )


def _positive(args: list[str], index: int, name: str, default: int) -> int:
    if index >= len(args):
        return default
    text = args[index]
    if _INTEGER.fullmatch(text) and int(text) > 0:
        return int(text)
    _say(f"Warning: Invalid value for {name}: '{text}'. Using default {default}.")
    return default


def parse_arguments(argv=None) -> SimulationConfig | None:
    """Build a configuration from the arguments; None when help was asked for."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in ("-h", "--help"):
        print(_usage())
        return None
    return SimulationConfig(
        producers=_positive(args, 0, "num_producers", DEFAULT_NUM_PRODUCERS),
        consumers=_positive(args, 1, "num_consumers", DEFAULT_NUM_CONSUMERS),
        items_per_producer=_positive(
            args, 2, "items_per_producer", DEFAULT_ITEMS_PER_PRODUCER
        ),
        buffer_size=_positive(args, 3, "buffer_size", DEFAULT_BUFFER_SIZE),
    )


def run_simulation(config: SimulationConfig, delay_scale: float = 1.0) -> SimulationResult:
    """Run the producers and consumers to completion and report the outcome."""
    buffer: deque[int] = deque()
    buffer_lock = threading.Lock()
    empty_slots = threading.Semaphore(config.buffer_size)
    filled_slots = threading.Semaphore(0)
    consumed: list[int] = []
    state = {"counter": 0, "done": False}
    timeout = max(_CONSUMER_TIMEOUT * delay_scale, _MIN_TIMEOUT)

    def pause(rng: random.Random, low: int, high: int) -> None:
        time.sleep(rng.randint(low, high) / 1000.0 * delay_scale)

    def producer(producer_id: int) -> None:
        rng = random.Random()
        for _ in range(config.items_per_producer):
            pause(rng, 80, 250)
            empty_slots.acquire()
            with buffer_lock:
                state["counter"] += 1
                item = state["counter"]
                buffer.append(item)
                _say(
                    f"[P{producer_id}] Produced: {item:2d} "
                    f"(Buffer: {len(buffer):2d}/{config.buffer_size:2d})"
                )
            filled_slots.release()
            pause(rng, 30, 150)
        _say(f"[P{producer_id}] Finished producing all {config.items_per_producer} items.")

    def consumer(consumer_id: int) -> None:
        rng = random.Random()
        while True:
            if filled_slots.acquire(timeout=timeout):
                item = None
                with buffer_lock:
                    if buffer:
                        item = buffer.popleft()
                        consumed.append(item)
                        _say(
                            f"[C{consumer_id}] Consumed: {item:2d} "
                            f"(Buffer: {len(buffer):2d}/{config.buffer_size:2d})"
                        )
                    should_exit = state["done"] and not buffer
                if item is not None:
                    empty_slots.release()
                    pause(rng, 100, 350)
                else:
                    filled_slots.release()
                if should_exit:
                    break
            else:
                with buffer_lock:
                    should_exit = state["done"] and not buffer
                if should_exit:
                    break
            pause(rng, 80, 200)
        _say(f"[C{consumer_id}] Finished consuming.")

    _say("=== Producer-Consumer Simulation ===")
    _say(
        f"Producers: {config.producers}, Consumers: {config.consumers}, "
        f"Items per Producer: {config.items_per_producer}, Buffer Size: {config.buffer_size}"
    )
    _say(f"Total Items: {config.expected_items}")
    _say("=====================================")

    producers = [
        threading.Thread(target=producer, args=(i,)) for i in range(1, config.producers + 1)
    ]
    consumers = [
        threading.Thread(target=consumer, args=(i,)) for i in range(1, config.consumers + 1)
    ]
    for thread in producers + consumers:
        thread.start()

    for thread in producers:
        thread.join()
    _say("\n>>> All producers finished.")
    with buffer_lock:
        state["done"] = True
    for _ in consumers:
        filled_slots.release()
    for thread in consumers:
        thread.join()
    _say(">>> All consumers finished.")

    result = SimulationResult(
        items_produced=state["counter"],
        expected_items=config.expected_items,
        remaining=len(buffer),
        consumed=tuple(consumed),
    )
    _say("\n=== Results ===")
    _say(f"Items produced: {result.items_produced}")
    _say(f"Expected items: {result.expected_items}")
    _say(f"Buffer final size: {result.remaining}")
    if result.remaining == 0:
        _say("✓ All items consumed successfully")
    else:
        _say(f"⚠ Warning: {result.remaining} items remain in buffer")
    return result


def main(argv=None) -> int:
    config = parse_arguments(argv)
    if config is None:
        return 1
    run_simulation(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())