import pytest

from fencetree.extraction.path_patterns import is_valid_candidate, normalize_candidate
from fencetree.extraction.path_resolver import PathResolver, ResolutionContext, resolve_path


def test_line_comment_hint_in_body() -> None:
    body = "// src/main/java/com/app/Greeter.java\n"

    assert resolve_path(body, "java") == "src/main/java/com/app/Greeter.java"


def test_hash_comment_hint_is_normalized_to_resource_root() -> None:
    body = "# application.yml\nspring:\n  application:\n    name: demo\n"

    assert resolve_path(body, "yaml") == "src/main/resources/application.yml"


def test_markup_comment_hint_in_body() -> None:
    body = "<!-- src/main/resources/logback.xml -->\n<configuration/>\n"

    assert resolve_path(body, "xml") == "src/main/resources/logback.xml"


def test_shebang_is_not_treated_as_hint_comment() -> None:
    body = "#!/bin/bash\necho hi\n"

    assert resolve_path(body, "text") == "scripts/script.sh"


def test_hints_after_first_five_lines_are_ignored() -> None:
    body = "a\nb\nc\nd\ne\n// src/main/java/com/app/Late.java\n"

    assert resolve_path(body, "text") is None


def test_body_hint_wins_over_section_hint() -> None:
    body = "// src/main/java/com/app/Greeter.java\nclass Greeter {}\n"

    assert resolve_path(body, "java", section="pom.xml") == "src/main/java/com/app/Greeter.java"


@pytest.mark.parametrize(
    ("section", "expected"),
    [
        ("File: docker-compose.yml", "docker-compose.yml"),
        ("The Dockerfile", "Dockerfile"),
        ("Add a .gitignore", ".gitignore"),
        ("Create `pom.xml`", "pom.xml"),
        ("application-test.properties", "src/test/resources/application-test.properties"),
        ("Profile application-dev.yml", "src/main/resources/application-dev.yml"),
        ("Defaults in application.yaml", "src/main/resources/application.yml"),
    ],
)
def test_section_heading_hint(section: str, expected: str) -> None:
    assert resolve_path("anything\n", "text", section=section) == expected


def test_context_window_hint() -> None:
    context = "Some intro.\nSave this as settings.gradle.kts\n\n"

    assert resolve_path("rootProject.name = 'demo'\n", "text", context_window=context) == "settings.gradle.kts"


def test_java_type_with_test_marker_goes_to_test_root() -> None:
    body = (
        "package com.sample;\n"
        "\n"
        "import org.junit.jupiter.api.Test;\n"
        "\n"
        "class Widget {\n"
        "    @Test\n"
        "    void works() {}\n"
        "}\n"
    )

    assert resolve_path(body, "java") == "src/test/java/com/sample/Widget.java"


@pytest.mark.parametrize("type_name", ["OrderServiceTest", "OrderServiceTests", "OrderSpec", "OrderRepositoryIT"])
def test_java_test_name_suffix_goes_to_test_root(type_name: str) -> None:
    body = f"package com.shop;\n\npublic class {type_name} {{\n}}\n"

    assert resolve_path(body, "java") == f"src/test/java/com/shop/{type_name}.java"


def test_java_production_type_goes_to_main_root() -> None:
    body = "package com.shop.order;\n\npublic interface OrderService {\n}\n"

    assert resolve_path(body, "Java") == "src/main/java/com/shop/order/OrderService.java"


def test_java_without_package_is_unresolved() -> None:
    assert resolve_path("public class Loose {}\n", "java") is None


def test_structural_inference_only_applies_to_java_tag() -> None:
    assert resolve_path("package com.x\n\nclass Thing\n", "kotlin") is None


def test_build_project_markup_resolves_to_build_descriptor() -> None:
    body = '<project xmlns="http://maven.apache.org/POM/4.0.0">\n  <modelVersion>4.0.0</modelVersion>\n</project>\n'

    assert resolve_path(body, "xml") == "pom.xml"


def test_framework_markup_resolves_to_context_config() -> None:
    assert resolve_path("<beans>\n</beans>\n", "xml") == "src/main/resources/application-context.xml"


def test_spring_yaml_defaults_to_main_resources() -> None:
    body = "server:\n  port: 8080\n"

    assert resolve_path(body, "yaml") == "src/main/resources/application.yml"


def test_spring_yaml_under_test_section_goes_to_test_resources() -> None:
    body = "spring:\n  datasource:\n    url: jdbc:h2:mem:test\n"

    assert resolve_path(body, "yml", section="Test configuration") == "src/test/resources/application-test.yml"


def test_compose_yaml_resolves_to_compose_descriptor() -> None:
    body = "services:\n  db:\n    image: postgres:16\n"

    assert resolve_path(body, "yaml") == "docker-compose.yml"


def test_properties_block() -> None:
    assert resolve_path("app.name=demo\n", "properties") == "src/main/resources/application.properties"


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ("CREATE TABLE item (id BIGINT);\n", "src/main/resources/schema.sql"),
        ("insert into item values (1);\n", "src/main/resources/data.sql"),
        ("SELECT 1;\n", "src/main/resources/script.sql"),
    ],
)
def test_sql_blocks(body: str, expected: str) -> None:
    assert resolve_path(body, "sql") == expected


def test_manifest_keyword_resolves_to_dockerfile() -> None:
    body = "FROM eclipse-temurin:21\nCOPY target/app.jar /app.jar\n"

    assert resolve_path(body, "text") == "Dockerfile"


def test_shebang_script_takes_name_from_section() -> None:
    body = "\n#!/usr/bin/env bash\nset -e\n"

    assert resolve_path(body, "bash", section="Deploy script deploy.sh") == "scripts/deploy.sh"


def test_shell_script_without_name_uses_default() -> None:
    assert resolve_path("echo building\n", "sh", section="Build helper") == "scripts/script.sh"


def test_gradle_build_scripts() -> None:
    body = "plugins {\n    id 'java'\n}\n"

    assert resolve_path(body, "groovy") == "build.gradle"
    assert resolve_path(body, "kotlin") == "build.gradle.kts"


def test_uncovered_block_has_no_destination() -> None:
    path = resolve_path(
        "print('hello')\n",
        "python",
        section="Helpers",
        context_window="Some words about helpers.\n",
    )

    assert path is None


def test_incidental_filename_in_prose_becomes_destination() -> None:
    # Loose matching cannot tell a mention from a directive.
    context = "As discussed, the old config.json caused problems.\n"

    assert resolve_path("some output\n", "text", context_window=context) == "config.json"


def test_custom_strategy_order() -> None:
    resolver = PathResolver(
        [
            ("rejected", lambda ctx: "notes.txt"),
            ("fixed", lambda ctx: "custom/File.json"),
        ]
    )

    assert resolver.strategy_names == ("rejected", "fixed")
    assert resolver.resolve(ResolutionContext(body="", language_tag="text")) == "custom/File.json"


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        ("src/main/java/A.java", True),
        ("Makefile", True),
        ("Dockerfile", True),
        (".gitignore", True),  # bare infra name, exempt from the leading-dot rule
        (".env.json", False),
        ("notes.txt", False),
        ("README", False),
        ("src/main/java/../../Escaped.java", False),
        ("../pom.xml", False),
    ],
)
def test_candidate_validation(candidate: str, expected: bool) -> None:
    assert is_valid_candidate(candidate) is expected


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        ("`pom.xml`", "pom.xml"),
        ('"src/main/java/A.java"', "src/main/java/A.java"),
        ("(deploy.sh)", "scripts/deploy.sh"),
        ("application.properties", "src/main/resources/application.properties"),
        ("application-test.yaml", "src/test/resources/application-test.yml"),
        ("<schema.sql>", "schema.sql"),
    ],
)
def test_candidate_normalization(candidate: str, expected: str) -> None:
    assert normalize_candidate(candidate) == expected


def test_parent_traversal_hint_leaves_block_unresolved() -> None:
    body = "// src/main/java/../../../../escaped.java\nclass X {}\n"

    assert resolve_path(body, "java") is None


def test_parent_traversal_in_section_is_ignored() -> None:
    body = "package com.app;\n\npublic class Greeter {}\n"

    path = resolve_path(body, "java", section="Move it to src/main/java/../../Greeter.java")

    assert path == "src/main/java/com/app/Greeter.java"
