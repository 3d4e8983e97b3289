"""
Artifact URL resolver implementation.

Finds where a dependency's jar can be downloaded from by probing the build's
Maven repositories with HEAD requests.
"""

import logging
from typing import Dict, List, Optional

import requests

from tweakjson.build_models import Coordinate, Repository
from tweakjson.tweakjson_logger import TweakjsonLogger


class ProbeStatus:
    """Enumeration of probe outcomes."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"
    SKIPPED = "skipped"


class ProbeResult:
    """
    Outcome of probing one repository for one artifact.
    """

    def __init__(
            self,
            dependency_key: str,
            repository_name: str,
            status: str,
            url: Optional[str] = None,
            status_code: Optional[int] = None,
            error_message: Optional[str] = None,
    ):
        """
        Initialize a probe result.

        Args:
            dependency_key: group:name:version of the probed dependency
            repository_name: Name of the repository that was probed
            status: One of the ProbeStatus values
            url: The URL that was requested, if any
            status_code: HTTP status code of the response, if one was received
            error_message: Error description if the request failed
        """
        self.dependency_key = dependency_key
        self.repository_name = repository_name
        self.status = status
        self.url = url
        self.status_code = status_code
        self.error_message = error_message

    def is_found(self) -> bool:
        return self.status == ProbeStatus.FOUND

    def __repr__(self) -> str:
        return (
            f"ProbeResult(key={self.dependency_key}, repo={self.repository_name}, "
            f"status={self.status}, url={self.url})"
        )


def maven_artifact_url(base_url: str, dependency: Coordinate) -> str:
    """
    Maven layout jar URL: ``<base>/<group as path>/<name>/<version>/<name>-<version>.jar``.
    """
    group_path = dependency.group.replace(".", "/")
    return (
        f"{base_url.rstrip('/')}/{group_path}/{dependency.name}/{dependency.version}/"
        f"{dependency.name}-{dependency.version}.jar"
    )


class ArtifactUrlResolver:
    """
    Resolves download URLs for dependencies.

    Repositories are probed in declaration order and the first one answering
    HTTP 200 wins. Request failures only mean "not found in this repository".
    """

    def __init__(
        self,
        repositories: List[Repository],
        logger: TweakjsonLogger,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the resolver.

        Args:
            repositories: Repositories of the build, in declaration order
            logger: Logger for progress and error messages
            timeout: Per-request timeout in seconds
            session: HTTP session to use; a new one is created and owned if omitted
        """
        self.repositories = repositories
        self.logger = logger
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.probe_results: List[ProbeResult] = []

    def __enter__(self) -> "ArtifactUrlResolver":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def resolve(self, dependency: Coordinate) -> Optional[str]:
        """
        Find a repository hosting the jar of ``dependency``.

        Args:
            dependency: Coordinates with group, name and version set

        Returns:
            The jar URL, or None if no repository has it
        """
        if not dependency.group or not dependency.version:
            self.logger.log(
                f"Cannot look up {dependency.key} without group and version",
                logging.DEBUG,
            )
            return None

        for repo in self.repositories:
            result = self._probe(repo, dependency)
            self.probe_results.append(result)
            if result.is_found():
                self.logger.log(
                    f"Found {dependency.key} in {repo.name or repo.url} at {result.url}",
                    logging.DEBUG,
                )
                return result.url

        self.logger.log(
            f"No repository hosts {dependency.key}",
            logging.DEBUG,
        )
        return None

    def _probe(self, repo: Repository, dependency: Coordinate) -> ProbeResult:
        """
        Issue a HEAD request against one repository.

        Args:
            repo: The repository to probe
            dependency: The dependency to look for

        Returns:
            ProbeResult describing what happened
        """
        if not repo.is_maven_http():
            return ProbeResult(dependency.key, repo.name, ProbeStatus.SKIPPED)

        url = maven_artifact_url(repo.url, dependency)
        try:
            response = self.session.head(url, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            self.logger.log(
                f"Failed to probe {url}: {str(e)}",
                logging.DEBUG,
            )
            return ProbeResult(
                dependency.key,
                repo.name,
                ProbeStatus.ERROR,
                url=url,
                error_message=str(e),
            )

        status = ProbeStatus.FOUND if response.status_code == 200 else ProbeStatus.NOT_FOUND
        response.close()
        return ProbeResult(
            dependency.key,
            repo.name,
            status,
            url=url,
            status_code=response.status_code,
        )

    def get_probe_summary(self) -> Dict[str, int]:
        """
        Get a summary of probe outcomes.

        Returns:
            Dictionary with counts of found, not found, failed and skipped probes
        """
        summary = {
            ProbeStatus.FOUND: 0,
            ProbeStatus.NOT_FOUND: 0,
            ProbeStatus.ERROR: 0,
            ProbeStatus.SKIPPED: 0,
        }
        for result in self.probe_results:
            summary[result.status] += 1
        summary["total"] = len(self.probe_results)
        return summary

    def get_failed_probes(self) -> List[ProbeResult]:
        return [r for r in self.probe_results if r.status == ProbeStatus.ERROR]
