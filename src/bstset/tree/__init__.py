from ._binary_tree import (
    BinaryTree,
    Empty,
    Node,
    decompose,
    empty,
    in_order,
    is_search_tree,
    recompose,
    render,
)
from ._exceptions import EmptyTreeError
