from lxml import html

from lyricgrab.extract.fallback import best_effort_main_content
from lyricgrab.normalize.html_cleaner import parse_html


def test_longest_block_under_body():
    root = parse_html(
        "<html><body><div><p>Short one</p></div>"
        "<p>A much longer paragraph of ordinary prose here.</p></body></html>"
    )
    assert best_effort_main_content(root) == "A much longer paragraph of ordinary prose here."


def test_first_wins_on_equal_length():
    root = parse_html("<html><body><p>abc</p><p>xyz</p></body></html>")
    assert best_effort_main_content(root) == "abc"


def test_uses_root_without_body():
    root = html.fragment_fromstring("<div><p>aa</p><p>bbbb</p></div>")
    assert best_effort_main_content(root) == "bbbb"


def test_removed_chrome_is_ignored():
    root = parse_html(
        "<html><body><nav>a very long navigation menu with many many links</nav><p>short</p></body></html>"
    )
    assert best_effort_main_content(root) == "short"


def test_nothing_to_return():
    assert best_effort_main_content(parse_html("")) == ""
    assert best_effort_main_content(parse_html("<html><body><script>x()</script></body></html>")) == ""
