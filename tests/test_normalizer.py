"""Tests for the record normalizer."""

from emote_catalog.core.types import MISSING_DANMAKU_NAME, MISSING_EMOTE_NAME
from emote_catalog.transformers import Candidate, Dropped, EmoteNormalizer, Rejected
from emote_catalog.transformers.normalizer import derive_file_name, is_image_reference

from conftest import emote


class TestEmoteNormalizer:
    """Test classification of raw emote entries."""

    def setup_method(self) -> None:
        self.normalizer = EmoteNormalizer()

    def test_valid_entry_becomes_candidate(self) -> None:
        """Test that an entry with both names and an image URL is a candidate."""
        outcome = self.normalizer.transform(
            "alpha", "Alpha Pack", emote("smile", "[tv_smile]", "https://x.com/e/a1.png")
        )

        assert isinstance(outcome, Candidate)
        assert outcome.record == {
            "folder_name": "alpha",
            "package_name": "Alpha Pack",
            "emote_name": "smile",
            "danmaku_name": "[tv_smile]",
            "og_file_name": "a1.png",
        }

    def test_non_image_url_is_dropped(self) -> None:
        """Test that a non-image URL is dropped before name checks."""
        outcome = self.normalizer.transform(
            "alpha", "Alpha Pack", emote("", "", "https://x.com/e/clip.mp4")
        )

        assert isinstance(outcome, Dropped)
        assert outcome.url == "https://x.com/e/clip.mp4"

    def test_missing_alias_rejected(self) -> None:
        """Test that an empty alias is rejected as missing_emote_name."""
        outcome = self.normalizer.transform(
            "alpha", "Alpha Pack", emote("", "[x]", "https://x.com/e/a3.png")
        )

        assert isinstance(outcome, Rejected)
        assert outcome.reason == MISSING_EMOTE_NAME
        assert outcome.record["og_file_name"] == "a3.png"

    def test_missing_text_rejected(self) -> None:
        """Test that an empty chat token is rejected as missing_danmaku_name."""
        outcome = self.normalizer.transform(
            "alpha", "Alpha Pack", emote("wave", "", "https://x.com/e/b3.png")
        )

        assert isinstance(outcome, Rejected)
        assert outcome.reason == MISSING_DANMAKU_NAME

    def test_missing_both_names_only_missing_emote_name(self) -> None:
        """Test that the alias check takes precedence over the token check."""
        outcome = self.normalizer.transform(
            "alpha", "Alpha Pack", emote(None, None, "https://x.com/e/a4.png")
        )

        assert isinstance(outcome, Rejected)
        assert outcome.reason == MISSING_EMOTE_NAME
        assert outcome.record["emote_name"] == ""
        assert outcome.record["danmaku_name"] == ""

    def test_entry_without_meta_rejected(self) -> None:
        """Test that an entry with no meta object counts as missing its alias."""
        outcome = self.normalizer.transform(
            "alpha", "Alpha Pack", {"text": "[x]", "url": "https://x.com/e/a5.png"}
        )

        assert isinstance(outcome, Rejected)
        assert outcome.reason == MISSING_EMOTE_NAME


class TestUrlHelpers:
    """Test URL inspection helpers."""

    def test_is_image_reference(self) -> None:
        """Test that only URLs mentioning .png count as images."""
        assert is_image_reference("https://x.com/e/a1.png")
        assert is_image_reference("https://x.com/e/a1.png@48w_48h.webp")
        assert not is_image_reference("https://x.com/e/clip.mp4")
        assert not is_image_reference("")

    def test_derive_file_name(self) -> None:
        """Test that the last path segment is returned."""
        assert derive_file_name("https://x.com/bfs/emote/a1.png") == "a1.png"
        assert derive_file_name("a1.png") == "a1.png"
