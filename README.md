# sortbench

sortbench times a plain top-down merge sort against a merge sort that hands
short ranges to insertion sort. It tests three kinds of input: random values,
values in reverse order, and values that are almost sorted.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the benchmark

```
sortbench
```

With no options the command runs every benchmark and writes these CSV files to
the current directory:

| File | Contents |
| --- | --- |
| `merge_random.csv`, `merge_reversed.csv`, `merge_almost_sorted.csv` | plain merge sort, columns `size,time` |
| `mergeinsert_random.csv`, `mergeinsert_reversed.csv`, `mergeinsert_almost_sorted.csv` | hybrid sort with threshold 15, columns `size,time` |
| `threshold_random.csv`, `threshold_reversed.csv`, `threshold_almost_sorted.csv` | hybrid sort at each threshold, columns `threshold,size,time` |

Times are whole milliseconds. In the `size,time` files each time is the
average of `--repeats` runs, and rows are ordered by size. In the threshold
files each row is a single run. A progress line is printed every hundred
arrays. The default run covers sizes 100 to 100000 in steps of 100 (plain and
hybrid runs) and 10000 to 100000 in steps of 100 (threshold runs), so it takes
a long time.

Options:

| Option | Meaning | Default |
| --- | --- | --- |
| `-o`, `--output-dir` | directory for the CSV files, created if missing | `.` |
| `--sizes N [N ...]` | array sizes for the plain and hybrid runs | 100, 200, ..., 100000 |
| `--long-sizes N [N ...]` | array sizes for the threshold runs | 10000, 10100, ..., 100000 |
| `--repeats N` | runs averaged per size in the plain and hybrid runs | 10 |
| `--thresholds N [N ...]` | thresholds for the threshold runs | 5 10 20 50 100 200 400 1000 2000 |
| `--seed N` | seed for the array generator | random |

A quick run:

```
sortbench -o results --sizes 100 200 300 --long-sizes 1000 2000 --repeats 2 --thresholds 5 50 --seed 1
```

## Using the library

```python
from sortbench.merge import merge_sort
from sortbench.merge_insert import merge_insert_sort, insertion_sort
from sortbench.generator import ArrayGenerator, standard_sizes, long_sizes
from sortbench.tester import SortTester
from sortbench.cli import save_to_csv, save_threshold_to_csv

values = [5, 3, 9, 1]
merge_sort(values, 0, len(values) - 1)           # sorts values[0:4] in place

values = [5, 3, 9, 1]
merge_insert_sort(values, 0, len(values) - 1, 15)

gen = ArrayGenerator(seed=42)
arrays = gen.almost_sorted_arrays(standard_sizes())

tester = SortTester(generator=gen, sizes=[100, 200], long_sizes=[1000], repeats=3)
timings = tester.standard_merge_random()         # {size: milliseconds}
save_to_csv("merge_random.csv", timings)
save_threshold_to_csv("threshold_random.csv", tester.threshold_random())
```

- `sortbench.merge`: `merge` and `merge_sort`, which sort the inclusive range
  `values[left..right]` in place.
- `sortbench.merge_insert`: `insertion_sort`, `merge` and `merge_insert_sort`;
  ranges of at most `threshold` elements go to insertion sort.
- `sortbench.generator`: `ArrayGenerator` with `random_array`,
  `reversed_array`, `almost_sorted_array` and their `*_arrays(sizes)` forms.
  Random arrays are windows of a pool of 100000 values between 0 and 6000;
  `random_array` raises `ValueError` for a length outside 0..100000. Almost
  sorted arrays are `0 .. length-1` with `length // 80` random pairs swapped.
  `standard_sizes()` and `long_sizes()` give the default size ranges.
- `sortbench.tester`: `SortTester` with `standard_merge_*`, `insert_merge_*`
  and `threshold_*` methods for `random`, `reversed` and `almost_sorted` data,
  and `clear_screen()`. It raises `ValueError` if `repeats` is below 1, and
  writes progress lines to `out` (standard output by default).
- `sortbench.cli`: `save_to_csv`, `save_threshold_to_csv` and `main`.

## What it does not do

sortbench only writes CSV files. It does not draw charts or analyse the
timings; use a separate tool for that.