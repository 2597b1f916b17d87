from bufscan.result import ScanResult
from bufscan.rules import ScanContext
from bufscan.rules.loop_boundary import LoopBoundaryRule
from bufscan.severity import Severity


def _scan(tmp_path, source):
    path = tmp_path / "loops.cpp"
    path.write_text(source, encoding="utf-8")
    result = ScanResult()
    LoopBoundaryRule().scan(ScanContext(source_path=path), result)
    return result


def test_inclusive_bound_is_flagged_at_loop_line(tmp_path):
    source = (
        "void fill(int arr[], int size) {\n"
        "    int i;\n"
        "    for (i = 0; i <= size; i++) {\n"
        "        arr[i] = i * 2;\n"
        "    }\n"
        "}\n"
    )

    result = _scan(tmp_path, source)

    assert len(result.findings) == 1
    finding = result.findings[0]
    assert finding.subject == "Loop boundary"
    assert finding.line_number == 3
    assert finding.description == "Loop may have improper boundary checking for array access"
    assert finding.severity is Severity.MEDIUM
    assert finding.rule == "loop_boundary"


def test_recognized_bound_shapes_are_not_flagged(tmp_path):
    source = (
        "for (size_t i = 0; i < arr.size(); i++) { arr[i] = 0; }\n"
        "for (int j = 0; j < s.length; j++) { s[j] = 'a'; }\n"
        "for (int k = 0; k < n - 1; k++) { out[k] = in[k]; }\n"
    )

    result = _scan(tmp_path, source)

    assert result.findings == []


def test_plain_less_than_without_size_is_flagged(tmp_path):
    result = _scan(tmp_path, "for (int i = 0; i < n; i++) { buf[i] = 0; }\n")

    assert [f.line_number for f in result.findings] == [1]


def test_loop_without_array_access_is_ignored(tmp_path):
    result = _scan(tmp_path, "for (int i = 0; i <= n; i++) {\n    total += i;\n}\n")

    assert result.findings == []


def test_each_loop_reports_its_own_line(tmp_path):
    source = (
        "for (int i = 0; i <= n; i++) {\n"
        "    a[i] = 0;\n"
        "}\n"
        "\n"
        "for (int j = 0; j <= m; j++) {\n"
        "    b[j] = 1;\n"
        "}\n"
    )

    result = _scan(tmp_path, source)

    assert [f.line_number for f in result.findings] == [1, 5]


def test_body_ends_at_first_closing_brace(tmp_path):
    source = (
        "for (int i = 0; i <= n; i++) {\n"
        "    if (i) { skip(); }\n"
        "    arr[i] = 0;\n"
        "}\n"
    )

    result = _scan(tmp_path, source)

    assert result.findings == []


def test_missing_source_adds_nothing(tmp_path):
    result = ScanResult()

    LoopBoundaryRule().scan(ScanContext(source_path=tmp_path / "missing.cpp"), result)

    assert result.findings == []
