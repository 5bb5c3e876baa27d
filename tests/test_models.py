import json

from sigscan.models import ExtractedSignature, FileSignatures


def test_signature_creation_defaults():
    sig = ExtractedSignature(name="hello", line_start=3, line_end=7)

    assert sig.name == "hello"
    assert sig.parameters == []
    assert sig.decorators == []
    assert sig.docstring is None
    assert sig.is_async is False
    assert sig.is_method is False
    assert sig.is_class is False
    assert sig.complexity == 1


def test_defaults_are_not_shared():
    first = ExtractedSignature(name="a", line_start=1, line_end=1)
    second = ExtractedSignature(name="b", line_start=2, line_end=2)

    first.parameters.append("x")

    assert second.parameters == []


def test_line_count():
    assert ExtractedSignature(name="f", line_start=5, line_end=5).line_count == 1
    assert ExtractedSignature(name="f", line_start=5, line_end=9).line_count == 5


def test_truncated_docstring_short_is_unchanged():
    sig = ExtractedSignature(name="f", line_start=1, line_end=2, docstring="Short.")

    assert sig.truncated_docstring() == "Short."


def test_truncated_docstring_long_is_cut():
    sig = ExtractedSignature(name="f", line_start=1, line_end=2, docstring="x" * 150)

    truncated = sig.truncated_docstring()

    assert truncated == "x" * 100 + "..."


def test_truncated_docstring_custom_limit():
    sig = ExtractedSignature(name="f", line_start=1, line_end=2, docstring="abcdef")

    assert sig.truncated_docstring(limit=3) == "abc..."


def test_truncated_docstring_none():
    sig = ExtractedSignature(name="f", line_start=1, line_end=2)

    assert sig.truncated_docstring() is None


def test_signature_to_dict():
    sig = ExtractedSignature(
        name="get",
        line_start=4,
        line_end=6,
        parameters=["id", "int"],
        is_method=True,
        complexity=2,
    )

    assert sig.to_dict() == {
        "name": "get",
        "line_start": 4,
        "line_end": 6,
        "parameters": ["id", "int"],
        "is_async": False,
        "is_method": True,
        "is_class": False,
        "docstring": None,
        "decorators": [],
        "complexity": 2,
    }


def test_file_signatures_to_dict_is_json_serializable():
    result = FileSignatures(
        path="src/lib.rs",
        signatures=[ExtractedSignature(name="main", line_start=1, line_end=3, decorators=["pub"])],
    )

    data = json.loads(json.dumps(result.to_dict()))

    assert data["path"] == "src/lib.rs"
    assert data["signatures"][0]["name"] == "main"
    assert data["signatures"][0]["decorators"] == ["pub"]
