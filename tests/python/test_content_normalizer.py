import pytest

from fencetree.contracts.block_models import FencedBlock
from fencetree.normalization.content_normalizer import (
    normalize_block,
    normalize_body,
    package_from_path,
)

GREETER = "src/main/java/com/app/Greeter.java"


def test_full_path_echo_is_stripped() -> None:
    body = f"// {GREETER}\npackage com.app;\n\npublic class Greeter {{}}\n"

    assert normalize_body(body, GREETER) == "package com.app;\n\npublic class Greeter {}\n"


def test_basename_echo_and_bare_comment_remnant_are_stripped() -> None:
    body = "// Greeter.java\n//\npublic class Greeter {}\n"

    assert normalize_body(body, GREETER) == "package com.app;\n\npublic class Greeter {}\n"


def test_at_most_one_remnant_line_is_dropped() -> None:
    body = "# application.yml\n#\n#\nspring:\n  main:\n    banner-mode: off\n"

    result = normalize_body(body, "src/main/resources/application.yml")

    assert result == "#\nspring:\n  main:\n    banner-mode: off\n"


def test_package_declaration_is_derived_from_path() -> None:
    body = "public class Widget {}\n"

    result = normalize_body(body, "src/test/java/com/sample/Widget.java")

    assert result == "package com.sample;\n\npublic class Widget {}\n"


def test_existing_package_declaration_is_kept() -> None:
    body = "package com.sample;\n\nclass Widget {}\n"

    assert normalize_body(body, "src/main/java/com/sample/Widget.java") == body


def test_no_package_for_file_directly_under_source_root() -> None:
    assert normalize_body("class Main {}\n", "src/main/java/Main.java") == "class Main {}\n"


def test_xml_prolog_added_to_framework_config() -> None:
    result = normalize_body("<beans>\n</beans>\n", "src/main/resources/application-context.xml")

    assert result == '<?xml version="1.0" encoding="UTF-8"?>\n<beans>\n</beans>\n'


def test_xml_prolog_not_added_to_build_descriptor() -> None:
    body = "<project>\n  <configuration/>\n</project>\n"

    assert normalize_body(body, "pom.xml") == body


def test_echo_never_survives_on_first_line() -> None:
    body = "<!-- docs/File.md -->\n# File.md title\ntext\n"

    result = normalize_body(body, "docs/File.md")

    assert result == "text\n"


def test_consecutive_echo_lines_are_all_removed() -> None:
    body = "// Foo.java\n// Foo.java (copy)\n// see Foo.java\nclass Foo {}\n// Foo.java trailer\n"

    result = normalize_body(body, "Foo.java")

    assert result == "class Foo {}\n// Foo.java trailer\n"


def test_single_echo_removes_one_remnant_line_only() -> None:
    body = "// Foo.java\n//\n//\nclass Foo {}\n"

    result = normalize_body(body, "Foo.java")

    assert result == "//\nclass Foo {}\n"


@pytest.mark.parametrize(
    ("body", "path"),
    [
        (f"// {GREETER}\n\npublic class Greeter {{}}\n", GREETER),
        ("\n\n// Greeter.java\n\n\nclass Greeter {}\n\n", GREETER),
        ("", GREETER),
        ("<!-- application-context.xml -->\n<beans/>\n", "src/main/resources/application-context.xml"),
        ("#!/bin/bash\r\necho deploy\r\n", "scripts/deploy.sh"),
        ("SELECT 1;", "src/main/resources/script.sql"),
    ],
)
def test_normalization_is_idempotent(body: str, path: str) -> None:
    once = normalize_body(body, path)

    assert normalize_body(once, path) == once


def test_normalize_block_returns_new_record() -> None:
    block = FencedBlock(sequence=1, language_tag="java", body=f"// {GREETER}\nclass Greeter {{}}\n", path=GREETER)

    normalized = normalize_block(block)

    assert normalized is not block
    assert normalized.body == "package com.app;\n\nclass Greeter {}\n"
    assert block.body.startswith("// ")
    assert normalized.sequence == block.sequence


def test_normalize_block_without_path_is_unchanged() -> None:
    block = FencedBlock(sequence=1, body="anything\n")

    assert normalize_block(block) is block


def test_package_from_path() -> None:
    assert package_from_path("src/main/java/com/a/b/C.java") == "com.a.b"
    assert package_from_path("lib/C.java") is None
