from ._exceptions import (
    DuplicateElementError,
    EmptySetError,
    MissingElementError,
    SelfTransferError,
    SetContractError,
)
from ._ordering import Comparable
from ._tree_set import TreeSet
