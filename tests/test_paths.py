import pytest

from flyyer import UNDEFINED, normalize_path


@pytest.mark.parametrize(
    "path",
    [
        ["dashboard", "company"],
        ["/dashboard", "company"],
        ["/dashboard", "/company"],
        ["dashboard", False, "/company"],
        ["/dashboard/", None, "/company/"],
        ["dashboard///", None, UNDEFINED, False, "////company/"],
        ("dashboard", "", "company"),
    ],
)
def test_joins_and_trims_parts(path):
    assert normalize_path(path) == "dashboard/company"


def test_single_values():
    assert normalize_path("about") == "about"
    assert normalize_path("/about/") == "about"
    assert normalize_path(7) == "7"
    assert normalize_path(None) == ""
    assert normalize_path() == ""
    assert normalize_path([]) == ""


def test_numbers_and_booleans():
    assert normalize_path(["products", 1]) == "products/1"
    assert normalize_path(["products", 0]) == "products/0"
    assert normalize_path(["products", "0"]) == "products/0"
    assert normalize_path(["products", float("inf")]) == "products/Infinity"
    assert normalize_path(["products", float("nan")]) == "products"
    assert normalize_path(["products", True]) == "products/true"
    assert normalize_path(["products", False]) == "products"
