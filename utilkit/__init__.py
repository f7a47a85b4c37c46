"""Small general-purpose data structures and helpers: sets, hash maps, lists, queues, stacks, vectors, permutations, timing, logging, results and a flag dispatcher."""

__version__ = "0.1.0"

__all__ = [
    "fifo",
    "hashmap",
    "llist",
    "logger",
    "minicli",
    "permutations",
    "result",
    "simpleset",
    "stack",
    "timing",
    "vec",
]