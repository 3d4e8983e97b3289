"""
Tests for repository probing.
"""

import pytest

from tweakjson.build_models import Coordinate, Repository
from tweakjson.repository_probe import ArtifactUrlResolver, ProbeStatus, maven_artifact_url
from tests.test_utils import FakeSession

BAR = Coordinate(group="com.foo", name="bar", version="1.0")
FIRST_URL = "https://first.test/com/foo/bar/1.0/bar-1.0.jar"
SECOND_URL = "https://second.test/maven/com/foo/bar/1.0/bar-1.0.jar"


@pytest.fixture
def repositories():
    return [
        Repository(name="first", type="maven", url="https://first.test/"),
        Repository(name="second", type="maven", url="https://second.test/maven"),
    ]


class TestMavenArtifactUrl:
    """Tests for Maven layout URL construction."""

    @pytest.mark.parametrize("base", ["https://repo.test/", "https://repo.test"])
    def test_single_slash_between_base_and_path(self, base):
        assert maven_artifact_url(base, BAR) == "https://repo.test/com/foo/bar/1.0/bar-1.0.jar"

    def test_group_dots_become_directories(self):
        coordinate = Coordinate(group="net.minecraft.launchwrapper", name="launchwrapper", version="1.12")
        assert maven_artifact_url("https://libraries.minecraft.net/", coordinate) == (
            "https://libraries.minecraft.net/net/minecraft/launchwrapper/launchwrapper/1.12/launchwrapper-1.12.jar"
        )


class TestArtifactUrlResolver:
    """Tests for ArtifactUrlResolver."""

    def test_first_found_wins(self, repositories, logger):
        session = FakeSession({FIRST_URL: 200, SECOND_URL: 200})
        resolver = ArtifactUrlResolver(repositories, logger, session=session)

        assert resolver.resolve(BAR) == FIRST_URL
        assert session.requested == [FIRST_URL]

    def test_falls_through_to_later_repository(self, repositories, logger):
        session = FakeSession({SECOND_URL: 200})
        resolver = ArtifactUrlResolver(repositories, logger, session=session)

        assert resolver.resolve(BAR) == SECOND_URL
        assert session.requested == [FIRST_URL, SECOND_URL]

    def test_request_failure_is_not_fatal(self, repositories, logger):
        session = FakeSession({SECOND_URL: 200}, failures=[FIRST_URL])
        resolver = ArtifactUrlResolver(repositories, logger, session=session)

        assert resolver.resolve(BAR) == SECOND_URL
        failed = resolver.get_failed_probes()
        assert len(failed) == 1
        assert failed[0].url == FIRST_URL
        assert "Connection refused" in failed[0].error_message

    def test_not_found_anywhere(self, repositories, logger):
        resolver = ArtifactUrlResolver(repositories, logger, session=FakeSession())

        assert resolver.resolve(BAR) is None
        assert all(r.status == ProbeStatus.NOT_FOUND for r in resolver.probe_results)
        assert [r.status_code for r in resolver.probe_results] == [404, 404]

    def test_only_200_counts_as_found(self, repositories, logger):
        session = FakeSession({FIRST_URL: 302, SECOND_URL: 204})
        resolver = ArtifactUrlResolver(repositories, logger, session=session)
        assert resolver.resolve(BAR) is None

    def test_non_http_and_non_maven_repositories_are_skipped(self, logger):
        repositories = [
            Repository(name="local", type="maven", url="file:///home/user/.m2/repository/"),
            Repository(name="libs", type="flatDir"),
            Repository(name="remote", type="maven", url="https://first.test/"),
        ]
        session = FakeSession({FIRST_URL: 200})
        resolver = ArtifactUrlResolver(repositories, logger, session=session)

        assert resolver.resolve(BAR) == FIRST_URL
        assert session.requested == [FIRST_URL]
        assert [r.status for r in resolver.probe_results] == [
            ProbeStatus.SKIPPED,
            ProbeStatus.SKIPPED,
            ProbeStatus.FOUND,
        ]

    @pytest.mark.parametrize(
        "coordinate",
        [
            Coordinate(name="bar", version="1.0"),
            Coordinate(group="com.foo", name="bar"),
        ],
    )
    def test_incomplete_coordinates_are_not_probed(self, repositories, logger, coordinate):
        session = FakeSession({FIRST_URL: 200})
        resolver = ArtifactUrlResolver(repositories, logger, session=session)

        assert resolver.resolve(coordinate) is None
        assert session.requested == []

    def test_probe_summary(self, repositories, logger):
        session = FakeSession({SECOND_URL: 200}, failures=[FIRST_URL])
        resolver = ArtifactUrlResolver(repositories, logger, session=session)
        resolver.resolve(BAR)
        resolver.resolve(Coordinate(group="com.foo", name="baz", version="2.0"))

        summary = resolver.get_probe_summary()
        assert summary == {
            ProbeStatus.FOUND: 1,
            ProbeStatus.NOT_FOUND: 2,
            ProbeStatus.ERROR: 1,
            ProbeStatus.SKIPPED: 0,
            "total": 4,
        }

    def test_injected_session_is_not_closed(self, repositories, logger):
        session = FakeSession()
        with ArtifactUrlResolver(repositories, logger, session=session):
            pass
        assert session.closed is False
