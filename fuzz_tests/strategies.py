import hypothesis.strategies as st

from bstset.script import ast

integer_elements = st.integers(min_value=-64, max_value=64)
text_elements = st.text(alphabet="ab ", max_size=4)

tokens = st.from_regex(r'[^\s;"]+', fullmatch=True) | st.from_regex(r'[^"]*', fullmatch=True)
statements = (
    st.builds(ast.Add, tokens)
    | st.builds(ast.Remove, tokens)
    | st.builds(ast.Contains, tokens)
    | st.just(ast.RemoveAny())
    | st.just(ast.Size())
    | st.just(ast.Clear())
)
scripts = st.builds(ast.Script, st.builds(tuple, st.lists(statements, max_size=8)))
