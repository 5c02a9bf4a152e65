"""
Producer-Consumer example with an unbounded LinkedList buffer.

Demonstrates:
- LinkedList as a FIFO queue: append() to enqueue, remove_head() to dequeue
- SimPy processes blocking on an event while the buffer is empty
- Fixed inter-arrival times so counts are reproducible

With the defaults (produce every 2, consume every 3, run for 30 time
units) 15 jobs are produced, 10 consumed and 5 left in the buffer.
"""

from __future__ import annotations

import simpy

from pylinkedlist import LinkedList


class JobQueue:
    """FIFO buffer that lets a consumer wait until a job arrives."""

    def __init__(self, env: simpy.Environment) -> None:
        self._env = env
        self._jobs: LinkedList[int] = LinkedList()
        self._nonempty: simpy.Event | None = None

    def __len__(self) -> int:
        return self._jobs.size()

    def put(self, job: int) -> None:
        self._jobs.append(job)
        if self._nonempty is not None:
            event, self._nonempty = self._nonempty, None
            event.succeed()

    def get(self):
        """Wait for a job and return it (use with yield from)."""
        while self._jobs.is_empty():
            self._nonempty = self._env.event()
            yield self._nonempty
        return self._jobs.remove_head().value


def producer(env: simpy.Environment, queue: JobQueue, interval: float, stats: dict):
    while True:
        queue.put(stats["produced"])
        stats["produced"] += 1
        yield env.timeout(interval)


def consumer(env: simpy.Environment, queue: JobQueue, interval: float, stats: dict):
    while True:
        job = yield from queue.get()
        stats["consumed"] += 1
        stats["order"].append(job)
        yield env.timeout(interval)


def run(
    produce_every: float = 2.0,
    consume_every: float = 3.0,
    until: float = 30.0,
) -> tuple[dict, JobQueue]:
    env = simpy.Environment()
    queue = JobQueue(env)
    stats = {"produced": 0, "consumed": 0, "order": []}

    env.process(producer(env, queue, produce_every, stats))
    env.process(consumer(env, queue, consume_every, stats))
    env.run(until=until)
    return stats, queue


def main() -> None:
    stats, queue = run()

    print(f"Total number of jobs produced {stats['produced']}")
    print(f"Total number of jobs consumed {stats['consumed']}")
    print(f"Jobs still queued {len(queue)}")


if __name__ == "__main__":
    main()
