# File: tests/test_parser.py
"""Tests for script location and top identifier extraction."""
import pytest

from akamai_watch.parser import UNPARSABLE_IDENTIFIER, extract_top_identifier, locate_script_url
from tests.conftest import HOST, page_with_scripts


# --------------------------------------------------------------------------- #
#                               Script locator                                #
# --------------------------------------------------------------------------- #


def test_last_script_is_selected():
    markup = page_with_scripts("/a.js", "/b.js", "/c.js")
    assert locate_script_url(markup, HOST) == f"https://{HOST}/c.js"


def test_sec_cpt_last_selects_second_to_last():
    markup = page_with_scripts("/a.js", "/b.js", "/_sec/cp_challenge/sec-cpt-check.js")
    assert locate_script_url(markup, HOST) == f"https://{HOST}/b.js"


def test_sec_cpt_not_last_is_ignored():
    markup = page_with_scripts("/sec-cpt-check.js", "/b.js")
    assert locate_script_url(markup, HOST) == f"https://{HOST}/b.js"


def test_host_with_port_is_kept():
    markup = page_with_scripts("/x/y/z")
    assert locate_script_url(markup, "localhost:8443") == "https://localhost:8443/x/y/z"


@pytest.mark.parametrize(
    "markup",
    [
        "<html><body><p>no scripts here</p></body></html>",
        "",
        page_with_scripts("/a.js", None),
        page_with_scripts("/sec-cpt.js"),
        page_with_scripts(None, "/sec-cpt.js"),
    ],
    ids=["no-scripts", "empty", "last-inline", "only-sec-cpt", "second-to-last-inline"],
)
def test_locator_gives_none(markup):
    assert locate_script_url(markup, HOST) is None


def test_locator_tolerates_broken_markup():
    markup = '<html><body><div><script src="/a.js"></script><script src="/b.js">'
    assert locate_script_url(markup, HOST) == f"https://{HOST}/b.js"


# --------------------------------------------------------------------------- #
#                              Top identifier                                 #
# --------------------------------------------------------------------------- #


def test_identifier_found():
    body = "/* build */ (function(){var FOO={};FOO.a=1;})();"
    assert extract_top_identifier(body) == "FOO"


def test_identifier_first_occurrence_wins():
    body = "(function(){var _ac={};})();(function(){var bmak={};})();"
    assert extract_top_identifier(body) == "_ac"


@pytest.mark.parametrize(
    "body",
    [
        "var x = 1;",
        "",
        "(function(){var FOO=[];})();",
        "(function(){var ={};})();",
        "(function(){var a, b={};})();",
    ],
)
def test_identifier_sentinel(body):
    assert extract_top_identifier(body) == UNPARSABLE_IDENTIFIER
