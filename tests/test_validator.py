"""
Tests for the lexical component validator.
"""

import pytest

from config import StylingMode
from templates import render_fallback, render_template
from validator import (
    is_valid_component,
    validate_component,
    validate_syntax,
)

GOOD = """\
import React from 'react';

function UserCard({ name }) {
  return <div>{name}</div>;
}

export default UserCard;
"""


class TestAcceptance:

    def test_accepts_well_formed_component(self):
        report = validate_component(GOOD, "UserCard")
        assert report == {"is_valid": True, "errors": [], "warnings": []}
        assert is_valid_component(GOOD, "UserCard")

    @pytest.mark.parametrize("keyword", ["const", "let", "var"])
    def test_accepts_variable_declarations(self, keyword):
        code = f"import React from 'react';\n{keyword} Foo = () => null;\nexport default Foo;"
        assert is_valid_component(code, "Foo")

    @pytest.mark.parametrize("mode", list(StylingMode))
    def test_accepts_every_template(self, mode):
        assert is_valid_component(render_template(mode, "UserCard"), "UserCard")
        assert is_valid_component(
            render_fallback(mode, "UserCard", "shows a user avatar"), "UserCard"
        )


class TestStructure:

    def test_rejects_missing_import(self):
        report = validate_component(GOOD.replace("import React from 'react';", ""), "UserCard")
        assert not report["is_valid"]
        assert any(e.startswith("MISSING_IMPORT") for e in report["errors"])

    def test_rejects_wrong_component_name(self):
        report = validate_component(GOOD, "ProfileCard")
        assert not report["is_valid"]
        assert any(e.startswith("MISSING_DEFINITION") for e in report["errors"])

    def test_name_must_match_exactly(self):
        code = GOOD.replace("function UserCard(", "function UserCardItem(")
        assert not is_valid_component(code, "UserCard")

    def test_rejects_missing_default_export(self):
        assert not is_valid_component(GOOD.replace("export default UserCard;", ""), "UserCard")

    def test_rejects_empty_text(self):
        assert len(validate_component("", "UserCard")["errors"]) == 3


class TestContamination:

    def test_rejects_table_markup(self):
        code = GOOD.replace("<div>{name}</div>", "<table><tr><td>{name}</td></tr></table>")
        report = validate_component(code, "UserCard")
        assert not report["is_valid"]
        assert any(e.startswith("CONTAMINATED_OUTPUT") for e in report["errors"])

    def test_rejects_file_path_with_line_number(self):
        assert not is_valid_component(GOOD + "\noutput.js:14\n", "UserCard")

    def test_rejects_echoed_instruction(self):
        code = GOOD + "\nThe component should be using Bootstrap for styling.\n"
        assert not is_valid_component(code, "UserCard")


class TestSyntaxWarnings:

    def test_balanced_code_has_no_warnings(self):
        assert validate_syntax(GOOD) == []

    def test_unclosed_brace_is_reported(self):
        warnings = validate_syntax("function Foo() {\n  return 1;\n")
        assert len(warnings) == 1
        assert "line 1" in warnings[0]

    def test_brackets_in_strings_and_comments_are_ignored(self):
        assert validate_syntax("const s = '{(';\n// )\n/* ] */\n") == []

    def test_apostrophe_in_jsx_text_is_not_a_string(self):
        code = "const Foo = () => (\n  <p>Don't {name}</p>\n);\n"
        assert validate_syntax(code) == []

    def test_warnings_do_not_block_acceptance(self):
        code = GOOD + "\nconst extra = {;\n"
        report = validate_component(code, "UserCard")
        assert report["is_valid"]
        assert report["warnings"]
