from readme_conventions.core.code_blocks import (
    MISSING_EXCERPT_SUMMARY,
    MISSING_LANGUAGE_SUMMARY,
    find_code_block_findings,
    validate_code_blocks,
)


def test_no_code_blocks_passes(diagnostics):
    lines = ["# Title", "", "Some text with `inline` code.", "| a | b |"]
    assert validate_code_blocks(lines, require_excerpts=True, diagnostics=diagnostics) is None
    assert diagnostics.errors == []


def test_tagged_blocks_pass():
    lines = ["```yaml", "a: 1", "```", "", "```bash", "ls", "```"]
    assert validate_code_blocks(lines) is None


def test_missing_language_is_reported_with_line_number(diagnostics):
    lines = ["# Title", "", "```", "code", "```"]
    assert validate_code_blocks(lines, diagnostics=diagnostics) == MISSING_LANGUAGE_SUMMARY
    assert diagnostics.errors[0] == "  Code block at line 3 is missing a language identifier."
    assert "```dart" in diagnostics.errors[-1]


def test_missing_language_ignores_excerpt_flag():
    lines = ["```", "code", "```"]
    assert validate_code_blocks(lines, require_excerpts=False) == MISSING_LANGUAGE_SUMMARY
    assert validate_code_blocks(lines, require_excerpts=True) == MISSING_LANGUAGE_SUMMARY


def test_whitespace_only_info_string_is_missing_language():
    findings = find_code_block_findings(["```   ", "code", "```"])
    assert findings.missing_language_lines == [1]


def test_dart_block_with_excerpt_directive_passes():
    lines = [
        "Usage:",
        '<?code-excerpt "main.dart (Example)"?>',
        "```dart",
        "void main() {}",
        "```",
    ]
    assert validate_code_blocks(lines, require_excerpts=True) is None


def test_dart_block_without_excerpt_directive(diagnostics):
    lines = [
        "Usage:",
        "```dart",
        "void main() {}",
        "```",
    ]
    findings = find_code_block_findings(lines, require_excerpts=True)
    assert findings.missing_excerpt_lines == [2]
    assert findings.missing_language_lines == []

    assert validate_code_blocks(lines, require_excerpts=True, diagnostics=diagnostics) == MISSING_EXCERPT_SUMMARY
    assert diagnostics.errors[0] == "  Dart code block at line 2 is not managed by code-excerpt."
    assert "build.excerpt.yaml" in diagnostics.errors[-1]


def test_excerpt_not_required_by_default():
    lines = ["```dart", "void main() {}", "```"]
    assert validate_code_blocks(lines) is None


def test_dart_block_on_first_line_is_unmanaged():
    findings = find_code_block_findings(["```dart", "void main() {}", "```"], require_excerpts=True)
    assert findings.missing_excerpt_lines == [1]


def test_indented_excerpt_directive_is_trimmed():
    lines = [
        '  <?code-excerpt "main.dart (Example)"?>',
        "  ```dart",
        "  void main() {}",
        "  ```",
    ]
    assert not find_code_block_findings(lines, require_excerpts=True)


def test_excerpt_only_checked_for_dart():
    lines = ["```yaml", "a: 1", "```"]
    assert validate_code_blocks(lines, require_excerpts=True) is None


def test_fences_alternate_open_and_close():
    findings = find_code_block_findings(["```", "```", "```"])
    # open, close, open
    assert findings.missing_language_lines == [1, 3]

    findings = find_code_block_findings(["```dart", "```", "```"])
    assert findings.missing_language_lines == [3]


def test_closing_fence_is_not_checked():
    findings = find_code_block_findings(["```bash", "ls", "```"])
    assert findings.missing_language_lines == []


def test_unterminated_block_is_tolerated():
    lines = ["```bash", "ls", "more text"]
    assert validate_code_blocks(lines) is None


def test_language_summary_wins_but_all_diagnostics_print(diagnostics):
    lines = [
        "```dart",
        "void main() {}",
        "```",
        "",
        "```",
        "plain",
        "```",
    ]
    result = validate_code_blocks(lines, require_excerpts=True, diagnostics=diagnostics)
    assert result == MISSING_LANGUAGE_SUMMARY
    assert "  Code block at line 5 is missing a language identifier." in diagnostics.errors
    assert "  Dart code block at line 1 is not managed by code-excerpt." in diagnostics.errors


def test_all_offending_lines_are_reported(diagnostics):
    lines = ["```", "a", "```", "```", "b", "```"]
    validate_code_blocks(lines, diagnostics=diagnostics)
    assert diagnostics.errors[:2] == [
        "  Code block at line 1 is missing a language identifier.",
        "  Code block at line 4 is missing a language identifier.",
    ]
