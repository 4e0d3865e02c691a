"""Classic data structures and algorithms in plain Python: sorting, searching,
string matching, lists, stacks, queues, trees, Huffman coding and graphs."""

__version__ = "0.1.0"

__all__ = [
    "adjacency",
    "binary_tree",
    "bst",
    "expression",
    "huffman",
    "linked_list",
    "matching",
    "mst",
    "puzzles",
    "queues",
    "searching",
    "sequential_list",
    "shortest_paths",
    "sorting",
    "stacks",
    "table_join",
    "tree_problems",
]