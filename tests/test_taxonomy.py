"""
Tests for the style taxonomy, the colour helpers and the AvatarConfig model.

Pure functions only: no network, no app.
"""

import pytest
from pydantic import ValidationError

from bskatar import colors, taxonomy
from bskatar.models import AvatarConfig


class TestTaxonomy:
    """Closed value sets and their defaults."""

    def test_every_default_style_is_legal(self):
        """Each style default belongs to its own domain."""
        for field, domain in taxonomy.STYLE_DOMAINS.items():
            assert taxonomy.DEFAULTS[field] in domain

    def test_ten_fields(self):
        """The record has exactly the ten configuration fields."""
        assert len(taxonomy.FIELDS) == 10
        assert set(taxonomy.FIELDS) == set(taxonomy.STYLE_DOMAINS) | set(taxonomy.COLOR_FIELDS) | {"hasBlush"}

    @pytest.mark.parametrize("field", list(taxonomy.STYLE_DOMAINS))
    def test_resolve_unknown_returns_default(self, field):
        """Unknown strings and non-strings resolve to the field default."""
        assert taxonomy.resolve(field, "definitely-not-a-style") == taxonomy.DEFAULTS[field]
        assert taxonomy.resolve(field, None) == taxonomy.DEFAULTS[field]
        assert taxonomy.resolve(field, 3) == taxonomy.DEFAULTS[field]

    def test_resolve_known_is_identity(self):
        """Legal values pass through unchanged."""
        assert taxonomy.resolve("hairStyle", "ponytail") == "ponytail"
        assert taxonomy.resolve("headShape", "square") == "square"

    def test_resolve_is_case_sensitive(self):
        """Style matching is exact, not case-folded."""
        assert taxonomy.resolve("hairStyle", "Spiky") == "short"

    def test_describe_is_json_friendly(self):
        """describe() returns lists and dicts only."""
        info = taxonomy.describe()
        assert info["styles"]["mouthStyle"] == ["smile", "neutral", "open", "cat", "surprised"]
        assert info["colors"] == ["headColor", "hairColor", "eyeColor"]
        assert info["defaults"]["hasBlush"] is True
        assert "#ffccaa" in info["swatches"]["headColor"]


class TestColors:
    """Hex parsing and derived colours."""

    def test_parse_long_and_short_forms(self):
        """Both hex forms parse; anything else is None."""
        assert colors.parse_hex("#ffffff") == (1.0, 1.0, 1.0)
        assert colors.parse_hex("000") == (0.0, 0.0, 0.0)
        assert colors.parse_hex("banana") is None
        assert colors.parse_hex(None) is None

    def test_normalize(self):
        """Normalize lower-cases, expands and falls back."""
        assert colors.normalize("#ABC", "#000000") == "#aabbcc"
        assert colors.normalize(" #4A3728 ", "#000000") == "#4a3728"
        assert colors.normalize("nope", "#123456") == "#123456"

    def test_nose_is_head_darkened_ten_percent(self):
        """Nose colour scales each head channel by 0.9."""
        assert colors.nose_color("#646464") == "#5a5a5a"
        assert colors.nose_color("#000000") == "#000000"

    def test_nose_falls_back_to_default_head(self):
        """An unparsable head colour darkens the default skin tone."""
        assert colors.nose_color("not-a-colour") == colors.nose_color(taxonomy.DEFAULTS["headColor"])

    def test_eyebrow_is_hair_colour(self):
        """Eyebrow colour is the normalised hair colour."""
        assert colors.eyebrow_color("#FF0000") == "#ff0000"
        assert colors.eyebrow_color("") == taxonomy.DEFAULTS["hairColor"]

    def test_scale_clamps(self):
        """Scaled channels never exceed 1."""
        assert colors.scale("#808080", 4.0, "#000000") == "#ffffff"


class TestAvatarConfig:
    """Frozen, default-filled configuration."""

    def test_defaults(self):
        """A bare config carries every default."""
        config = AvatarConfig.defaults()
        assert config.to_fields() == taxonomy.DEFAULTS

    def test_populate_by_alias_and_name(self):
        """Record names and attribute names are interchangeable."""
        a = AvatarConfig(hairStyle="bob")
        b = AvatarConfig(hair_style="bob")
        assert a == b
        assert a.hair_style == "bob"

    def test_unknown_style_becomes_default(self):
        """Unknown styles are coerced rather than rejected."""
        config = AvatarConfig(eyeStyle="lasers", mouthStyle="")
        assert config.eye_style == "dots"
        assert config.mouth_style == "smile"

    def test_blank_colour_becomes_default(self):
        """Blank or missing colours take the default."""
        config = AvatarConfig(headColor="   ", hairColor=None)
        assert config.head_color == "#ffccaa"
        assert config.hair_color == "#4a3728"

    def test_colour_is_kept_verbatim(self):
        """Colour strings are stored as given."""
        assert AvatarConfig(eyeColor="chartreuse").eye_color == "chartreuse"

    def test_non_bool_blush_becomes_default(self):
        """Only real booleans set hasBlush."""
        assert AvatarConfig(hasBlush="no").has_blush is True
        assert AvatarConfig(hasBlush=False).has_blush is False

    def test_frozen(self):
        """Configs cannot be mutated in place."""
        config = AvatarConfig()
        with pytest.raises(ValidationError):
            config.hair_style = "bob"

    def test_with_updates_returns_new_instance(self):
        """with_updates leaves the original untouched."""
        config = AvatarConfig()
        updated = config.with_updates({"hairStyle": "spiky"}, eye_color="#00ff00")
        assert updated is not config
        assert updated.hair_style == "spiky"
        assert updated.eye_color == "#00ff00"
        assert config.hair_style == "short"

    def test_with_updates_ignores_unknown_keys(self):
        """Keys that are not fields are dropped."""
        config = AvatarConfig()
        assert config.with_updates({"hatStyle": "fedora"}) == config
