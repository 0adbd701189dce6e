"""Rules engine for six-player Chinese Checkers on a hexagram board."""
