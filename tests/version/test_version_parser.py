"""
Tests for rustcprobe.version.parser module.
"""

import datetime
import threading

import pytest

from rustcprobe.core.exceptions import (
    ClippyDriverError,
    InvalidNumberError,
    MissingVersionNumberError,
    UnrecognizedChannelError,
    UnrecognizedFormatError,
    VersionParseError,
)
from rustcprobe.version.channel import Beta, Dev, Nightly, Stable
from rustcprobe.version.model import RustVersion
from rustcprobe.version.parser import parse_version, try_parse_version


D = datetime.date


# Well-formed Banner Tests


class TestParseVersion:
    """Tests for parse_version on valid banners."""

    def test_bare_stable(self):
        """Test minimal stable output."""
        assert parse_version("1.70.0") == RustVersion(1, 70, 0, Stable(), None)

    def test_beta_with_number(self):
        """Test numbered beta with commit info."""
        assert parse_version("1.70.0-beta.3 (abc1234 2023-05-01)") == RustVersion(
            1, 70, 0, Beta(3), D(2023, 5, 1)
        )

    def test_nightly_date_folded_into_channel(self):
        """Test the commit date becomes the nightly date."""
        assert parse_version("1.80.0-nightly (def5678 2024-06-01)") == RustVersion(
            1, 80, 0, Nightly(D(2024, 6, 1)), D(2024, 6, 1)
        )

    def test_dev(self):
        """Test local development build."""
        assert parse_version("1.80.0-dev") == RustVersion(1, 80, 0, Dev(), None)

    def test_program_name_stripped(self):
        """Test leading rustc token."""
        assert parse_version("rustc 1.75.2 (def1234 2024-01-01)") == RustVersion(
            1, 75, 2, Stable(), D(2024, 1, 1)
        )

    def test_fixture_banners(self, rustc_banners):
        """Test real-world banners for every channel."""
        assert parse_version(rustc_banners["stable"]).is_stable()
        assert parse_version(rustc_banners["beta"]).is_beta()
        assert parse_version(rustc_banners["nightly"]).is_nightly()
        assert parse_version(rustc_banners["dev"]).is_dev()

    def test_bare_beta_distinct_from_beta_zero(self):
        """Test -beta and -beta.0 differ."""
        bare = parse_version("1.70.0-beta")
        zero = parse_version("1.70.0-beta.0")

        assert bare.channel == Beta(None)
        assert zero.channel == Beta(0)
        assert bare != zero

    def test_nightly_without_group(self):
        """Test nightly with no parenthesized group keeps no date."""
        v = parse_version("rustc 1.80.0-nightly")

        assert v.channel == Nightly(None)
        assert v.commit_date is None

    def test_dev_date_only_as_commit_date(self):
        """Test dev never carries a channel date."""
        v = parse_version("rustc 1.80.0-dev (def5678 2024-06-01)")

        assert v.channel == Dev()
        assert v.commit_date == D(2024, 6, 1)

    @pytest.mark.parametrize(
        "banner",
        [
            "   rustc 1.75.2 (def1234 2024-01-01)   ",
            "rustc    1.75.2   (def1234    2024-01-01)",
            "\trustc 1.75.2 (def1234 2024-01-01)\n",
        ],
    )
    def test_whitespace_tolerated(self, banner):
        """Test surrounding and repeated whitespace."""
        assert parse_version(banner) == RustVersion(1, 75, 2, Stable(), D(2024, 1, 1))

    def test_last_line_used(self):
        """Test warnings printed before the banner are skipped."""
        banner = (
            "warning: sccache is not configured\n"
            "rustc 1.70.0 (90c541806 2023-05-31)\n\n"
        )

        assert parse_version(banner) == RustVersion(1, 70, 0, Stable(), D(2023, 5, 31))

    def test_trailing_vendor_group(self):
        """Test distro suffixes after the commit group are ignored."""
        v = parse_version("rustc 1.86.0 (05f9846f8 2025-03-31) (Homebrew)")

        assert v == RustVersion(1, 86, 0, Stable(), D(2025, 3, 31))

    @pytest.mark.parametrize(
        "banner",
        [
            "rustc 1.70.0 (built from a source tarball)",
            "rustc 1.70.0 (abc1234)",
            "rustc 1.70.0 (abc1234 yesterday)",
            "rustc 1.70.0 (abc1234 2023-02-30)",
            "rustc 1.70.0 (abc1234 2023-5-1)",
            "rustc 1.70.0 abc1234 2023-05-01",
        ],
    )
    def test_odd_groups_ignored(self, banner):
        """Test malformed commit information is ignored, not fatal."""
        assert parse_version(banner) == RustVersion.stable(1, 70, 0)

    def test_custom_program_names(self):
        """Test accepting additional leading program tokens."""
        v = parse_version("rustc-wrapper 1.70.0", program_names=("rustc-wrapper",))

        assert v == RustVersion.stable(1, 70, 0)

    def test_idempotent(self, rustc_banners):
        """Test re-parsing yields structurally equal values."""
        for banner in rustc_banners.values():
            assert parse_version(banner) == parse_version(banner)

    def test_concurrent_parsing(self, rustc_banners):
        """Test parsing from several threads gives identical results."""
        banner = rustc_banners["nightly"]
        expected = parse_version(banner)
        results = []

        def worker():
            for _ in range(100):
                results.append(parse_version(banner))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 400
        assert all(r == expected for r in results)


# Malformed Banner Tests


class TestParseVersionErrors:
    """Tests for parse_version failures."""

    @pytest.mark.parametrize(
        "banner",
        [
            "",
            "   ",
            "\n\n",
            "garbage",
            "v1.70.0",
            "rustc",
            "rustc version",
            "rustc (abc1234 2024-01-01)",
        ],
    )
    def test_unrecognized_format(self, banner):
        """Test input with no numeric version token."""
        with pytest.raises(UnrecognizedFormatError):
            parse_version(banner)

    @pytest.mark.parametrize(
        "banner", ["cargo 1.70.0", "rustdoc 1.70.0 (abc1234 2023-05-01)"]
    )
    def test_other_program_rejected(self, banner):
        """Test version tokens are only taken after a known program name."""
        with pytest.raises(UnrecognizedFormatError):
            parse_version(banner)

    def test_program_name_without_version_message(self):
        """Test the diagnostic names the program token."""
        with pytest.raises(UnrecognizedFormatError) as exc_info:
            parse_version("rustc version")

        assert exc_info.value.found == "version"
        assert "after 'rustc'" in str(exc_info.value)

    def test_clippy_driver(self):
        """Test clippy-driver banners are reported distinctly."""
        with pytest.raises(ClippyDriverError) as exc_info:
            parse_version("clippy 0.1.80 (def5678 2024-06-01)")

        assert isinstance(exc_info.value, UnrecognizedFormatError)

    @pytest.mark.parametrize(
        "banner",
        [
            "1.70",
            "rustc 1.70",
            "1.70.0.1",
        ],
    )
    def test_missing_version_number(self, banner):
        """Test recognizable banners without a full version token."""
        with pytest.raises(MissingVersionNumberError):
            parse_version(banner)

    @pytest.mark.parametrize(
        "banner",
        [
            "1.x.0",
            "1.2.3x",
            "rustc 1..0",
            "1.70.0-beta.x",
            "1.70.0-beta.",
            "1.70.0-beta.1.2",
            "99999999999.0.0",
        ],
    )
    def test_invalid_number(self, banner):
        """Test non-numeric and oversized numbers."""
        with pytest.raises(InvalidNumberError):
            parse_version(banner)

    @pytest.mark.parametrize(
        "banner",
        [
            "1.2.3-unknownchannel",
            "1.2.3-",
            "1.2.3-Nightly",
            "1.2.3-betax",
            "1.2.3-development",
        ],
    )
    def test_unrecognized_channel(self, banner):
        """Test unknown suffixes."""
        with pytest.raises(UnrecognizedChannelError):
            parse_version(banner)

    def test_error_message_describes_expected_and_found(self):
        """Test diagnostics carry what was expected versus found."""
        with pytest.raises(UnrecognizedChannelError) as exc_info:
            parse_version("rustc 1.2.3-unknownchannel")

        err = exc_info.value
        assert err.found == "unknownchannel"
        assert err.banner == "rustc 1.2.3-unknownchannel"
        assert "nightly" in str(err)
        assert "unknownchannel" in str(err)

    def test_all_failures_share_base_class(self):
        """Test callers can catch every parse failure at once."""
        for banner in ("", "garbage", "1.x.0", "1.2.3-unknownchannel", "rustc"):
            with pytest.raises(VersionParseError):
                parse_version(banner)


class TestTryParseVersion:
    """Tests for try_parse_version."""

    def test_success(self):
        """Test a valid banner."""
        assert try_parse_version("1.70.0") == RustVersion.stable(1, 70, 0)

    @pytest.mark.parametrize("banner", ["", "garbage", "1.x.0", "1.2.3-unknownchannel"])
    def test_failure_returns_none(self, banner):
        """Test failures become None."""
        assert try_parse_version(banner) is None
