"""Message tree strategies.

Trees are built from the public node types only. Named expressions use the
identifier itself as their source, so two occurrences of one name always
deduplicate and never conflict; anonymous expressions get distinct sources.
"""

from hypothesis import event
from hypothesis import strategies as st

from i18nmacro.enums import MacroKind
from i18nmacro.syntax.ast import Element, Expression, Macro, MacroOptions, MessageNode, Text

# Characters that exercise quoting: syntax characters, apostrophes and
# JSX whitespace, mixed with ordinary letters.
SYNTAX_HEAVY_CHARS = "{}<>' \t\nab"

identifiers = st.from_regex(r"[A-Za-z_$][A-Za-z0-9_$]{0,8}", fullmatch=True)

literal_text = st.one_of(
    st.text(alphabet=SYNTAX_HEAVY_CHARS, max_size=12),
    st.text(
        alphabet=st.characters(codec="utf-8", exclude_categories=("Cs",)),
        max_size=12,
    ),
)

text_nodes = st.builds(Text, literal_text, st.booleans())


@st.composite
def expressions(draw: st.DrawFn) -> Expression:
    """Named (bare identifier) or anonymous (member access) expression."""
    if draw(st.booleans()):
        identifier = draw(identifiers)
        event("expression=named")
        return Expression(identifier, identifier)
    event("expression=anonymous")
    path = draw(st.lists(identifiers, min_size=2, max_size=3))
    return Expression(".".join(path))


def _element_from(children: st.SearchStrategy[list[MessageNode]]) -> st.SearchStrategy[Element]:
    return st.builds(
        lambda tag, kids, self_closing: Element(
            tag, () if self_closing else tuple(kids), self_closing
        ),
        st.sampled_from(["a", "b", "strong", "br", "Link"]),
        children,
        st.booleans(),
    )


message_nodes = st.recursive(
    st.one_of(text_nodes, expressions()),
    lambda children: _element_from(st.lists(children, max_size=4)),
    max_leaves=12,
)

elements = _element_from(st.lists(message_nodes, max_size=4))


@st.composite
def _macro(draw: st.DrawFn, kind: MacroKind) -> Macro:
    children = draw(st.lists(message_nodes, min_size=1, max_size=6))
    context = draw(st.none() | st.text(max_size=6))
    comment = draw(st.none() | st.text(max_size=6))
    event(f"macro={kind}")
    return Macro(tuple(children), MacroOptions(context=context, comment=comment), kind)


plain_macros = _macro(MacroKind.PLAIN)
structural_macros = _macro(MacroKind.STRUCTURAL)
macros = st.one_of(plain_macros, structural_macros)
