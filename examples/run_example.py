"""
Example: build a few selectors and run one against a small page.
"""

from objects import decode_from_json_as, encode_to_json, make_rectangle, Rectangle
from utils.parser import select_elements
from web_selectors import css_selector_builder as builder

SAMPLE_HTML = """
<html>
<body>
<div id="main" class="container draggable">
  <a href="/img/cat.png">Cat</a>
  <a href="/about">About</a>
</div>
<table id="data"><tr><td>1</td><td>2</td></tr><tr><td>3</td><td>4</td></tr></table>
</body>
</html>
"""


def run():
    print(builder.id("main").class_("container").class_("editable").stringify())

    png_link = builder.element("a").attr('href$=".png"')
    print(png_link.pseudo_class("focus").stringify())
    print(select_elements(SAMPLE_HTML, png_link))

    nested = builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    )
    print(nested.stringify())

    payload = encode_to_json(make_rectangle(10, 20))
    print(payload, decode_from_json_as(Rectangle, payload).get_area())


if __name__ == "__main__":
    run()
