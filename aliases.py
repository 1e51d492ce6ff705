from typing import Literal, TypeAlias

ElementType: TypeAlias = Literal['node', 'way', 'relation']
ElementKey: TypeAlias = tuple[ElementType, int]
Tags: TypeAlias = dict[str, str]

# tag name -> accepted value substrings, empty means "any value"
TagFilter: TypeAlias = dict[str, tuple[str, ...]]
