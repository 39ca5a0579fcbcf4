# ecsgroup

`ecsgroup` provides `EntityGroup` in the module `ecsgroup.entity_group`: a
read-only sequence of entities stored compactly. A group holds two parts:

* a list of *fragmented* entities, given one by one, and
* a contiguous run of `count` entities. The entity at position `index` of the
  group (past the fragmented part) is `make_entity(first + index)`.

Fragmented entities come first, then the contiguous run. The length of the
group is the number of fragmented entities plus `count`.

## Installation

```
pip install .
```

## Usage

```python
from ecsgroup.entity_group import EntityGroup

group = EntityGroup(["a", "b"], first=100, count=3, make_entity=lambda v: f"e{v}")

len(group)              # 5
group.num_fragmented()  # 2
group.at(0)             # "a"
group.at(2)             # "e102"
list(group)             # ["a", "b", "e102", "e103", "e104"]
```

`make_entity` is any callable that turns an integer value into an entity.
When it is left out, the integer value itself is used.

The constructor raises `ValueError` when `first` or `count` is negative.

### Checked and unchecked access

* `group.at(index)` raises `IndexError` when `index` is negative or not less
  than `len(group)`.
* `group[index]` raises `IndexError` for a negative index but does not check
  the upper bound: an index past the fragmented part always yields
  `make_entity(first + index)`, even beyond `len(group)`.

Iterating a group yields the fragmented entities in order, then the
`count` entities of the contiguous run.

## What this package does not do

`EntityGroup` only describes a set of entities. The package does not create,
store or destroy entities, and has no components, archetypes, worlds or jobs.

## Running the tests

```
pip install .[test]
pytest
```