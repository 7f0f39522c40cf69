"""
Integration Tests for Nested Forms.

Tests complete declaration passes over nested input:
    - Error propagation from forms and formsets, at any depth
    - Live error maps shared between child and parent
    - Output of a realistic signup schema
"""

from __future__ import annotations

from typing import Any, Dict

from formnest.domain.value_objects import IndexedErrors, flatten_errors
from formnest.validation.field import Field
from formnest.validation.form import Form


class SignupForm(Form):
    """Realistic schema used across these tests."""


@SignupForm.define_validation("username")
def username(field: Field, value: Any) -> bool:
    return isinstance(value, str) and value.isalnum() and value.islower()


class PictureForm(SignupForm):
    """Child form type for pictures."""


def build_signup(data: Dict[str, Any]) -> SignupForm:
    """Declare the full signup schema on `data`."""
    form = SignupForm(data)
    form.field("username").strip().required().length(3, 20).username()
    form.field("email").required().email()
    form.field("password").required().length(6)
    form.field("password_confirmation").ignore()
    form.group("password", "password_confirmation").equal()
    form.fieldset("tags").count(None, 5).length(1, 10)

    company = form.form("company")
    company.field("name").required()

    for picture in form.formset("pictures", PictureForm).count(None, 3).value:
        picture.field("title").required()
        picture.field("url").required().url()
    return form


class TestPropagation:
    """Errors in nested forms surface in the parent."""

    def test_form_error_propagates(self) -> None:
        """
        SCENARIO: {company: {name: ""}} with a required name
        EXPECTED: Parent invalid, errors["company"]["name"] == ("required",)
        """
        # Arrange
        parent = Form({"company": {"name": ""}})

        # Act
        parent.form("company").field("name").required()

        # Assert
        assert not parent.is_valid
        assert parent.errors["company"]["name"] == ("required",)

    def test_formset_error_is_indexed(self) -> None:
        """
        SCENARIO: Second of two pictures has an empty title
        EXPECTED: Parent error only at index 1
        """
        parent = Form({"pictures": [{"title": "a"}, {"title": ""}]})

        for picture in parent.formset("pictures").value:
            picture.field("title").required()

        errors = parent.errors["pictures"]
        assert isinstance(errors, IndexedErrors)
        assert list(errors) == [1]
        assert errors[1] == {"title": ("required",)}

    def test_later_child_errors_show_in_parent(self) -> None:
        """
        SCENARIO: Child reports a second error after the first propagated
        EXPECTED: Parent sees both through the shared map
        """
        parent = Form({"company": {"name": "", "vat": ""}})
        company = parent.form("company")

        company.field("name").required()
        company.field("vat").required()

        assert parent.errors["company"] is company.errors
        assert parent.errors["company"] == {
            "name": ("required",),
            "vat": ("required",),
        }

    def test_deep_nesting(self) -> None:
        """
        SCENARIO: Error three levels down inside a formset
        EXPECTED: Reaches the root under every declared name
        """
        root = Form({"a": {"items": [{"b": {"c": "ok"}}, {"b": {"c": ""}}]}})

        a = root.form("a")
        for item in a.formset("items").value:
            item.form("b").field("c").required()

        assert flatten_errors(root.errors) == {"a.items.1.b.c": ("required",)}
        assert not root.is_valid and not a.is_valid

    def test_valid_child_keeps_parent_valid(self) -> None:
        """
        SCENARIO: Nested form with valid data
        EXPECTED: No error entries anywhere
        """
        parent = Form({"company": {"name": "ACME"}})

        parent.form("company").field("name").required()

        assert parent.is_valid
        assert parent.errors == {}

    def test_absent_nested_object(self) -> None:
        """
        SCENARIO: form("company") when the key is missing
        EXPECTED: Child sees empty input, required fails and propagates
        """
        parent = Form({})

        company = parent.form("company")
        company.field("name").required()

        assert company.input is None
        assert parent.errors == {"company": {"name": ("required",)}}

    def test_formset_field_blocks_after_child_error(self) -> None:
        """
        SCENARIO: count() on a formset after a child failed
        EXPECTED: count is skipped (the formset is already invalid)
        """
        parent = Form({"pics": [{"t": ""}, {"t": ""}, {"t": ""}]})
        pics = parent.formset("pics")
        for pic in pics.value:
            pic.field("t").required()

        pics.count(None, 1)

        assert set(parent.errors["pics"]) == {0, 1, 2}

    def test_child_is_independent(self) -> None:
        """
        SCENARIO: A form built without a parent
        EXPECTED: Works on its own
        """
        child = Form({"name": ""})

        child.field("name").required()

        assert child.errors == {"name": ("required",)}


class TestSignupSchema:
    """Full schema with custom validators and nested forms."""

    def test_valid_signup(self, signup_input: Dict[str, Any]) -> None:
        """
        SCENARIO: Fully valid payload
        EXPECTED: Valid, output without the ignored confirmation
        """
        form = build_signup(signup_input)

        assert form.is_valid, form.errors
        assert form.output() == {
            "username": "ada",
            "email": "ada@example.com",
            "password": "s3cret!",
            "tags": ["math", "engines"],
            "company": {"name": "Analytical Engines Ltd"},
            "pictures": [
                {"title": "portrait", "url": "https://example.com/ada.png"},
                {"title": "engine", "url": "https://example.com/engine.png"},
            ],
        }

    def test_invalid_signup(self, signup_input: Dict[str, Any]) -> None:
        """
        SCENARIO: Several problems across the schema
        EXPECTED: Each problem reported where it belongs
        """
        signup_input.update(
            {
                "username": "  Ada Lovelace ",
                "email": "",
                "password_confirmation": "different",
                "tags": ["ok", "", "much-too-long-tag"],
                "company": {"name": ""},
            }
        )
        signup_input["pictures"][1]["url"] = "not a url"

        form = build_signup(signup_input)

        assert form.has_errors
        assert form.errors["username"] == ("username",)
        assert form.errors["email"] == ("required",)
        assert form.errors["password"] == ("equal",)
        assert form.errors["tags"] == {1: ("length", 1, 10), 2: ("length", 1, 10)}
        assert form.errors["company"] == {"name": ("required",)}
        assert form.errors["pictures"] == {1: {"url": ("url",)}}

    def test_custom_validator_reaches_child_forms(self, signup_input: Dict[str, Any]) -> None:
        """
        SCENARIO: username validator registered on SignupForm
        EXPECTED: Available on PictureForm children, not on base Form
        """
        form = build_signup(signup_input)
        picture = form.formsets["pictures"].value[0]

        assert isinstance(picture, PictureForm)
        assert "username" in picture.validators
        assert "username" not in Form.validators

    def test_mapper_over_nested_output(self, signup_input: Dict[str, Any]) -> None:
        """
        SCENARIO: Root mapper reshaping the nested output
        EXPECTED: Mapper sees fully built child output
        """
        form = build_signup(signup_input)

        @form.map
        def summary(result: Dict[str, Any]) -> Dict[str, Any]:
            return {
                "user": result["username"],
                "company": result["company"]["name"],
                "picture_count": len(result["pictures"]),
            }

        assert form.output() == {
            "user": "ada",
            "company": "Analytical Engines Ltd",
            "picture_count": 2,
        }

    def test_too_many_pictures(self, signup_input: Dict[str, Any]) -> None:
        """
        SCENARIO: Four pictures where at most three are allowed
        EXPECTED: Only the set-level error on pictures
        """
        picture = {"title": "t", "url": "https://example.com/t.png"}
        signup_input["pictures"] = [dict(picture) for _ in range(4)]

        form = build_signup(signup_input)

        assert form.errors == {"pictures": ("count", None, 3)}
