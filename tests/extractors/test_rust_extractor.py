from sigscan.config import ExtractionConfig
from sigscan.extractors.rust import RustExtractor, has_test_attribute, is_inside_impl


def test_extract_basic_items():
    source = """
            pub fn hello() {}
            fn internal(a: i32) -> i32 { a + 1 }
            async fn fetch() {}
            struct Data {}
        """
    sigs = RustExtractor().extract(source)

    assert len(sigs) == 4
    assert sigs[0].name == "hello"
    assert sigs[0].decorators == ["pub"]
    assert sigs[1].name == "internal"
    assert sigs[1].parameters == ["a"]
    assert sigs[1].decorators == []
    assert sigs[2].name == "fetch"
    assert sigs[2].is_async
    assert sigs[3].name == "Data"
    assert sigs[3].is_class


def test_line_extents():
    source = """struct Repo {
    id: u32,
}

impl Repo {
    fn new(id: u32) -> Self {
        Repo { id }
    }
    fn get(&self) -> u32 {
        self.id
    }
}

fn main() {
    let r = Repo::new(1);
}
"""
    sigs = RustExtractor().extract(source)

    assert [(s.name, s.line_start, s.line_end) for s in sigs] == [
        ("Repo", 1, 3),
        ("new", 6, 8),
        ("get", 9, 11),
        ("main", 14, 16),
    ]
    assert [s.is_method for s in sigs] == [False, True, True, False]
    assert sigs[1].parameters == ["id"]
    assert sigs[2].parameters == ["self"]


def test_struct_is_never_async_or_method():
    source = "impl Foo {\n}\npub struct Foo {\n    x: u8,\n}\n"
    sig = RustExtractor().extract(source)[0]

    assert sig.is_class
    assert not sig.is_method
    assert not sig.is_async
    assert sig.complexity == 1


def test_brace_inside_string_literal():
    source = 'fn hello() {\n  let x = "}";\n  if true {\n    foo();\n  }\n}'
    sigs = RustExtractor().extract(source)

    assert len(sigs) == 1
    assert sigs[0].line_start == 1
    assert sigs[0].line_end == 6
    assert sigs[0].complexity == 2


def test_restricted_visibility_is_pub():
    sig = RustExtractor().extract("pub(crate) fn helper(x: u8) {}\n")[0]

    assert sig.name == "helper"
    assert sig.decorators == ["pub"]


def test_generic_function():
    sig = RustExtractor().extract("fn largest<T: PartialOrd>(list: &[T]) -> &T {\n    &list[0]\n}\n")[0]

    assert sig.name == "largest"
    assert sig.parameters == ["list"]
    assert sig.line_end == 3


def test_fn_after_impl_without_blank_line_is_reported_as_method():
    # Known limitation of the text heuristic
    source = "impl A {\n    fn a(&self) {}\n}\nfn top() {}\n"
    sigs = RustExtractor().extract(source)

    assert [(s.name, s.is_method) for s in sigs] == [("a", True), ("top", True)]


def test_blank_line_inside_impl_breaks_method_detection():
    # Known limitation of the text heuristic
    source = "impl A {\n    fn a(&self) {}\n\n    fn b(&self) {}\n}\n"
    sigs = RustExtractor().extract(source)

    assert [(s.name, s.is_method) for s in sigs] == [("a", True), ("b", False)]


def test_is_inside_impl():
    text = "impl A {\n    fn a() {}\n}\n\nfn b() {}\n"

    assert is_inside_impl(text, text.index("    fn a"))
    assert not is_inside_impl(text, text.index("fn b"))
    assert not is_inside_impl("fn c() {}", 0)


def test_test_functions_are_skipped():
    source = """#[test]
fn it_works() {
    assert!(true);
}

#[tokio::test]
async fn it_awaits() {}

#[test]
#[ignore]
fn slow() {}

fn real() {}
"""
    sigs = RustExtractor().extract(source)

    assert [s.name for s in sigs] == ["real"]


def test_test_functions_kept_when_configured():
    source = "#[test]\nfn it_works() {}\n\nfn real() {}\n"
    extractor = RustExtractor(ExtractionConfig(skip_test_functions=False))

    assert [s.name for s in extractor.extract(source)] == ["it_works", "real"]


def test_other_attributes_do_not_skip():
    source = "#[inline]\nfn fast() {}\n"

    assert [s.name for s in RustExtractor().extract(source)] == ["fast"]


def test_has_test_attribute_stops_at_non_attribute_line():
    lines = ["#[test]", "fn a() {}", "fn b() {}"]

    assert has_test_attribute(lines, 2)
    assert not has_test_attribute(lines, 3)


def test_brace_scan_limit_from_config():
    source = "fn open() {\n" + "    x();\n" * 20
    extractor = RustExtractor(ExtractionConfig(brace_scan_limit=5))

    assert extractor.extract(source)[0].line_end == 6


def test_empty_source():
    assert RustExtractor().extract("") == []
