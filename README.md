# algopad

A collection of classic algorithm solutions and small data structures. It also
has a few command-line tools: a greatest-common-divisor calculator, which runs
on the command line and as a small web form, and two helpers for CSV and text
files.

## Library

The solutions are grouped by technique:

| Module                | What it holds                                                                 |
|-----------------------|-------------------------------------------------------------------------------|
| `algopad.arrays`      | binary search on answers, submatrix counting, majority element, top-k         |
| `algopad.bits`        | bit tricks: `update_bits`, `find_integers`, `kth_character`                   |
| `algopad.parens`      | `is_valid` and `min_remove_to_make_valid`                                     |
| `algopad.dp`          | LCS, regex matching, job scheduling, max subarray, grid game, robot distances |
| `algopad.graph`       | course scheduling, rotting oranges, shortest path collecting all keys         |
| `algopad.hashing`     | `two_sum`, `two_sum_pairs`, `can_arrange`, unique binary strings              |
| `algopad.heaps`       | heap-driven scoring, chair assignment, smallest covering range                |
| `algopad.sliding`     | product-below-k subarrays and three jump-game solutions                       |
| `algopad.strings`     | palindromes, prefix scores, string reorganisation, `minimize_result`, `Trie`  |
| `algopad.trees`       | vertical order, flip equivalence, lexical order, depth, path sum, `ParentNode` and `lowest_common_ancestor` |
| `algopad.structs`     | `TreeNode` and `TrieNode`                                                     |
| `algopad.lru_cache`   | `LRUCache`                                                                    |
| `algopad.linked_list` | `ListNode` and `DoublyLinkedList`                                             |
| `algopad.gcd`         | `gcd` and the `algopad-gcd` command                                           |
| `algopad.web`         | `create_app`, the Flask application behind `algopad-gcd-server`               |
| `algopad.csv_tools`   | `combine_csv`, `generate_comma_list` and their commands                       |

Where inputs break a solution's assumptions, for example an empty list where a
value is needed, the function raises `ValueError`.

A few examples:

```python
from algopad.gcd import gcd
from algopad.arrays import min_eating_speed, top_k_frequent
from algopad.dp import job_scheduling
from algopad.lru_cache import LRUCache
from algopad.strings import Trie, is_palindrome

gcd(14, 15)                                   # 1
min_eating_speed([3, 6, 7, 11], 8)            # 4
sorted(top_k_frequent([1, 1, 1, 2, 2, 3], 2)) # [1, 2]
job_scheduling([1, 2, 3, 3], [3, 4, 5, 6], [50, 10, 40, 70])  # 120
is_palindrome("a, bb -a")                     # True

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)        # 1
cache.put(3, 3)     # evicts key 2
cache.get(2)        # -1

trie = Trie()
trie.insert("apple")
trie.search("apple")     # True
trie.starts_with("app")  # True
```

## Command-line tools

### Greatest common divisor

```
algopad-gcd 42 56 98
```

prints the greatest common divisor of all the numbers given. Each argument
must be a non-negative integer below 2**64, and a zero among two or more
numbers is reported as an error. With no numbers at all a usage message is
printed. Every error exits with status 1.

### GCD web form

```
algopad-gcd-server
```

serves a small form on `127.0.0.1:3000`. Use `--host` and `--port` to change
the address. Submitting two positive integers shows their greatest common
divisor. A zero, or a field that is missing or not a number, gets a
"400 Bad Request".

### Combining CSV files

```
algopad-combine-csv [DIRECTORY]
```

appends every `.csv` file in `DIRECTORY` (the current directory by default) to
`combined_output.csv` in that directory. The files are taken in name order,
and only the first file keeps its header line. The output file itself is
skipped.

### Building comma-separated lists

```
algopad-comma-list -i names.txt -c 1
```

reads `names.txt` and appends two lines to `comma.separate.list.output.txt` in
the current directory:

- the input's lines joined with commas;
- the constant value repeated once per input line, joined with commas.

The long forms of the options are `--inputFile` and `--constantValue`.