# backend/modules/forms/tests/test_form_config_service.py

import copy

import pytest

from modules.forms.services.form_config_service import (
    build_schema,
    generate_field_id,
    get_expected_data_type,
    normalize_form_config,
    validate_form_config,
)
from modules.forms.models.form_models import ExpectedDataType, FieldKind
from modules.forms.exceptions import InvalidFormConfigurationError


class TestGenerateFieldId:
    """Test cases for field id generation"""

    @pytest.mark.parametrize("kind,index,label,expected", [
        ("text_input", 2, "Your Name", "textinput_2_yourname"),
        (FieldKind.MULTIPLE_CHOICE, 0, "Pick one!", "multiplechoice_0_pickone"),
        ("section_title", 4, None, "sectiontitle_4"),
        ("email", 1, "", "email_1"),
        ("file_upload", 3, "Upload your CV (PDF only) please", "fileupload_3_uploadyourcvpdfonlyp"),
    ])
    def test_generate_field_id(self, kind, index, label, expected):
        assert generate_field_id(kind, index, label) == expected


class TestExpectedDataType:

    @pytest.mark.parametrize("kind,expected", [
        ("number", ExpectedDataType.NUMBER),
        ("rating", ExpectedDataType.NUMBER),
        ("checkboxes", ExpectedDataType.ARRAY),
        ("multi-choice", ExpectedDataType.ARRAY),
        ("file_upload", ExpectedDataType.FILE),
        (FieldKind.IMAGE_UPLOAD, ExpectedDataType.FILE),
        ("email", ExpectedDataType.STRING),
        ("dropdown", ExpectedDataType.STRING),
        ("signature_pad", ExpectedDataType.STRING),
    ])
    def test_expected_data_type(self, kind, expected):
        assert get_expected_data_type(kind) == expected


class TestValidateFormConfig:
    """Test cases for stored configuration checks"""

    @pytest.mark.parametrize("config", [None, [], "fields"])
    def test_config_must_be_object(self, config):
        result = validate_form_config(config)

        assert result.success is False
        assert result.errors == ["Form configuration must be a valid object"]

    @pytest.mark.parametrize("config", [{}, {"fields": "text"}, {"fields": None}])
    def test_fields_array_required(self, config):
        result = validate_form_config(config)

        assert result.errors == ["Form configuration must contain a fields array"]

    def test_empty_fields_allowed_as_draft(self):
        assert validate_form_config({"fields": []}).success is True

    def test_valid_config(self, feedback_form_schema):
        result = validate_form_config({"fields": feedback_form_schema})

        assert result.success is True, result.errors

    def test_field_errors_are_collected(self):
        """Each field problem is reported with its 1-based position"""
        config = {
            "fields": [
                {"type": "text_input"},
                {"label": "No type"},
                {"type": "hologram", "label": "Mystery"},
                {"type": "section_title"},
                {"type": "description"},
                {"type": "dropdown", "label": "Size", "options": []},
                "oops",
            ]
        }

        result = validate_form_config(config)

        assert result.success is False
        assert result.errors == [
            "Field 1: label or title is required for input components",
            "Field 2: type is required",
            "Field 3: invalid field type 'hologram'",
            "Field 4: title is required for section titles",
            "Field 5: content or description is required for description components",
            "Field 6: options array is required for choice components",
            "Field 7: must be an object",
        ]

    def test_title_satisfies_label(self):
        config = {"fields": [{"type": "email", "title": "Email"}]}

        assert validate_form_config(config).success is True

    def test_description_content(self):
        config = {"fields": [{"type": "description", "description": "Fill in below"}]}

        assert validate_form_config(config).success is True

    def test_duplicate_ids(self):
        config = {
            "fields": [
                {"id": "q1", "type": "text_input", "label": "A"},
                {"id": "q1", "type": "textarea", "label": "B"},
            ]
        }

        result = validate_form_config(config)

        assert result.errors == ["Field 2: duplicate field id 'q1'"]


class TestNormalizeFormConfig:
    """Test cases for configuration normalization"""

    def test_ids_and_required_are_filled(self):
        config = {
            "title": "Survey",
            "fields": [
                {"type": "text_input", "label": "Your Name"},
                {"id": "keep", "type": "rating", "label": "Rating", "required": 1},
                {"type": "divider"},
            ],
        }
        original = copy.deepcopy(config)

        normalized = normalize_form_config(config)

        assert config == original
        assert normalized["title"] == "Survey"
        assert normalized["fields"] == [
            {"id": "textinput_0_yourname", "type": "text_input", "label": "Your Name", "required": False},
            {"id": "keep", "type": "rating", "label": "Rating", "required": True},
            {"id": "divider_2", "type": "divider"},
        ]

    def test_empty_fields_returned_as_copy(self):
        config = {"fields": []}

        normalized = normalize_form_config(config)

        assert normalized == config
        assert normalized is not config


class TestBuildSchema:
    """Test cases for parsing configurations into descriptors"""

    def test_build_schema(self, feedback_form_schema):
        schema = build_schema({"fields": feedback_form_schema})

        assert len(schema) == len(feedback_form_schema)
        assert schema[0].kind == FieldKind.SECTION_TITLE
        assert schema[0].label == "Tell us about your visit"
        assert schema[4].constraints.min == 1
        assert schema[4].constraints.max == 100
        assert schema[1].required is True

    def test_unknown_kind_is_kept(self):
        schema = build_schema({"fields": [{"type": "signature_pad", "label": "Sign"}]})

        assert schema[0].kind == "signature_pad"
        assert schema[0].known_kind is None
        assert schema[0].id == "signaturepad_0_sign"

    @pytest.mark.parametrize("config", [None, {}, {"fields": "x"}])
    def test_missing_fields_raises(self, config):
        with pytest.raises(InvalidFormConfigurationError):
            build_schema(config)

    def test_malformed_field_raises(self):
        with pytest.raises(InvalidFormConfigurationError) as exc_info:
            build_schema({"fields": [{"type": 5, "label": "Bad"}]})

        assert "malformed" in exc_info.value.message
