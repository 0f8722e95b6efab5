# thinkdrills

A collection of small, self-contained programming drills: recursive
processing of sequences, linked lists and binary trees, student-record
collections with selectable "first student" policies, several ways of
looking records up by student number, a decorator-based student profile,
and a hangman game that cheats.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Modules

- `thinkdrills.sequences` – `sum_positive`, `has_odd_parity`,
  `count_occurrences`, `find_min` and `total`, each with a `_recursive`
  twin, plus a recursive `factorial` and the helpers `random_values` and
  `random_bits`.
- `thinkdrills.linked` – `IntList`, a singly linked list of integers
  built from `Node` cells, with the same drills as methods
  (`sum_positive`, `has_odd_parity`, `count`, `min`, each with a
  recursive version) and `count_negatives`.
- `thinkdrills.trees` – `TreeNode`, `in_order`, `is_heap`,
  `is_search_tree` and `SearchTree`, a binary search tree with `total`,
  `average`, `median` and `mode`.
- `thinkdrills.student` – the frozen `StudentRecord` and the
  `FirstStudentPolicy` choices, backed by `higher_grade`,
  `lower_student_number` and `name_comes_first`.
- `thinkdrills.roster` – `Roster`, an ordered collection of student
  records with `average` (truncated to a whole number), `within_range`
  (bounds must lie in 1..100), `set_policy` and `first_student`; also
  `push_record` and `average_grade` for plain lists of records.
- `thinkdrills.lookup` – finding records by number: `sort_by_id` with
  `interpolation_search`, `StudentTable` (fixed-size open addressing,
  21 slots by default), `StudentTree` and `index_by_id`; plus
  `sort_movable` and `insertion_sort_movable`, which sort by grade while
  leaving records graded -1 where they are.
- `thinkdrills.profile` – optional student details stacked with
  decorators (`BasicProfile` wrapped in `TermPaperTitle`,
  `YearOfEnrolment`, `Audit`) or kept as free-form text in `ExtraFields`.
- `thinkdrills.hangman` – `CheatingHangman`, which after each guess keeps
  the largest family of candidate words, and the word-list helpers it is
  built on (`load_words`, `matches_pattern`, `most_frequent_pattern`, ...).

Lookups that find nothing return `None`; empty inputs to averages,
minimums, medians and modes raise `ValueError`.

## Example

```python
from thinkdrills.roster import Roster
from thinkdrills.student import StudentRecord, FirstStudentPolicy

roster = Roster([
    StudentRecord(1001, 50, "Max"),
    StudentRecord(1003, 65, "Andrew"),
])
roster.set_policy(FirstStudentPolicy.NAME_COMES_FIRST)
print(roster.first_student().describe())
# Name = Andrew, ID = 1003, Grade = 65
```

## Playing hangman

The game reads a word list (whitespace-separated words; words holding an
apostrophe are skipped), by default from `words.txt` in the current
directory, or from a file named on the command line:

```
thinkdrills-hangman
thinkdrills-hangman mywords.txt
```

You choose the word length and the number of wrong guesses allowed
(each a single digit from 1 to 9), then guess lower-case letters one at a
time. `--list` prints the loaded word list and exits instead of playing.

No word list ships with the package; you supply your own.