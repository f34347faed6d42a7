"""Parse a template fragment and print its tree."""

from tagtree import Element, parse

source = """
<section class="card">
  <h1>Welcome</h1>
  <p>Hello <b>{{ name }}</b></p>
  <img src="avatar.png" />
</section>
"""


def dump(node, depth: int = 0) -> None:
    pad = "  " * depth
    if isinstance(node, Element):
        props = " ".join(f"{p.name}={p.value!r}" for p in node.props)
        print(f"{pad}{node.tag_name} {props}".rstrip())
        for child in node.children:
            dump(child, depth + 1)
    else:
        print(f"{pad}{node.content!r}")


root = parse(source)
if root is not None:
    dump(root)
