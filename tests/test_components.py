from ui.components import plain_md


def test_plain_md_escapes_markdown():
    assert plain_md("1 *Main* St") == r"1 \*Main\* St"
    assert plain_md("[gate](x) #4") == r"\[gate\]\(x\) \#4"


def test_plain_md_handles_none_and_plain_text():
    assert plain_md(None) == ""
    assert plain_md("Jane Doe") == "Jane Doe"
