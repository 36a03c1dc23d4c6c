from . import ast
from ._element_type import ElementType
from ._evaluate import Evaluation, evaluate_script
from ._exceptions import InvalidElementError
from ._parser import parse_script
