from sigscan.extractors.javascript import JavascriptExtractor

SAMPLE = """function greet(name) {
  return "hi " + name;
}

const add = (a, b) => {
  return a + b;
};

async function load(url) {
  await fetch(url);
}

class Widget {
  constructor(el) {
    this.el = el;
  }

  render() {
    return this.el;
  }

}

const api = {
  get(id) {
    return id;
  },
};
"""


def test_extract_sample():
    sigs = JavascriptExtractor().extract(SAMPLE)

    assert [(s.name, s.line_start, s.line_end) for s in sigs] == [
        ("greet", 1, 3),
        ("add", 5, 7),
        ("load", 9, 11),
        ("Widget", 13, 22),
        ("get", 25, 27),
    ]
    assert sigs[1].parameters == ["a", "b"]
    assert sigs[2].is_async
    assert not sigs[0].is_async
    assert sigs[3].is_class
    assert sigs[4].parameters == ["id"]


def test_class_methods_fold_into_class():
    sigs = JavascriptExtractor().extract(SAMPLE)
    names = [s.name for s in sigs]

    assert "render" not in names
    assert "constructor" not in names


def test_never_reports_methods():
    sigs = JavascriptExtractor().extract(SAMPLE)

    assert not any(s.is_method for s in sigs)


def test_control_flow_is_not_a_function():
    source = """function run() {
  if (x) {
    go();
  }
  for (let i = 0; i < n; i++) {
  }
}
"""
    sigs = JavascriptExtractor().extract(source)

    assert [s.name for s in sigs] == ["run"]
    assert sigs[0].line_end == 7


def test_typescript_annotations():
    source = "export function f(a: number, b: string): void {\n  return;\n}\n"
    sig = JavascriptExtractor().extract(source)[0]

    assert sig.name == "f"
    assert sig.parameters == ["a", "b"]


def test_export_default_class():
    sigs = JavascriptExtractor().extract("export default class App {\n}\n")

    assert [(s.name, s.is_class, s.line_end) for s in sigs] == [("App", True, 2)]


def test_bound_function_expression():
    source = "const handler = async function (event) {\n  return event;\n};\n"
    sig = JavascriptExtractor().extract(source)[0]

    assert sig.name == "handler"
    assert sig.is_async
    assert sig.parameters == ["event"]


def test_default_values_keep_declaration_side():
    sig = JavascriptExtractor().extract("function f(a = 1, b) {\n}\n")[0]

    assert sig.parameters == ["a", "b"]


def test_template_literal_braces_ignored():
    source = "function f() {\n  const s = `${a}}\n  }`;\n  return s;\n}\n"
    sig = JavascriptExtractor().extract(source)[0]

    assert sig.line_end == 5
