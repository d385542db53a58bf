"""Tests for candidate and version models."""

from sdkui.core.models import (
    CandidateVersion,
    JavaVersion,
    LocalCandidate,
    OtherVersion,
    RemoteCandidate,
    parse_version,
)


def _java(usage: str = "", status: str = "") -> JavaVersion:
    return JavaVersion(
        vendor="Temurin",
        usage=usage,
        version="17.0.7",
        distribution="tem",
        status=status,
        identifier="17.0.7-tem",
    )


def test_parse_version_java_row() -> None:
    version = parse_version(" Temurin | >>> | 17.0.7 | tem | installed | 17.0.7-tem")

    assert version == _java(usage=">>>", status="installed")


def test_parse_version_java_row_with_missing_columns() -> None:
    version = parse_version("Temurin | | 17.0.7")

    assert isinstance(version, JavaVersion)
    assert version.distribution == ""
    assert version.identifier == ""


def test_parse_version_plain_token() -> None:
    assert parse_version("  8.1.1 ") == OtherVersion("8.1.1")


def test_other_version_render_is_right_aligned() -> None:
    assert OtherVersion("8.1.1").render() == "           8.1.1"


def test_java_version_render_columns() -> None:
    rendered = _java().render()

    assert rendered.startswith(" Temurin      ")
    assert "17.0.7-tem" in rendered


def test_candidate_version_render_plain_markers() -> None:
    assert CandidateVersion.remote(OtherVersion("1.0")).render() == "   1.0 "
    assert CandidateVersion.local(OtherVersion("1.0"), True, True).render() == " > * 1.0 "
    assert CandidateVersion.local(OtherVersion("1.0"), True, False).render() == "  * 1.0 "


def test_candidate_version_render_java_replaces_use_and_status() -> None:
    version = CandidateVersion.local(_java(usage="xx", status="local only"), True, True)

    assert version.render() == _java(usage=">>>", status="installed").render()
    assert CandidateVersion.remote(_java(usage=">>>")).render() == _java().render()


def test_local_candidate_current_version() -> None:
    local = LocalCandidate(
        binary_name="gradle",
        versions=(
            CandidateVersion.local(OtherVersion("7.6"), True, False),
            CandidateVersion.local(OtherVersion("8.1.1"), True, True),
        ),
    )

    assert local.version_names() == ["7.6", "8.1.1"]
    assert local.current_version == "8.1.1"
    assert LocalCandidate(binary_name="ant").current_version is None


def test_remote_candidate_updates_return_copies() -> None:
    candidate = RemoteCandidate(
        name="Gradle",
        binary_name="gradle",
        description="",
        homepage="https://gradle.org",
        default_version="8.1.1",
    )
    local = LocalCandidate(
        binary_name="gradle",
        versions=(CandidateVersion.local(OtherVersion("8.0"), True, True),),
    )

    merged = candidate.with_local(local)
    with_versions = merged.with_versions([CandidateVersion.remote(OtherVersion("8.1.1"))])

    assert candidate.is_installed is False
    assert merged.installed_versions == ("8.0",)
    assert merged.current_version == "8.0"
    assert merged.is_installed is True
    assert with_versions.versions == (CandidateVersion.remote(OtherVersion("8.1.1")),)
    assert merged.versions == ()
    assert candidate.install_command == "$ sdk install gradle"
