"""
Manifest assembler.

Collects the dependencies of the build, keeps those present on the runtime
classpath, looks up their download URLs and writes the launcher manifest.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

from tweakjson.build_models import BuildSnapshot, Configuration, Coordinate, Project
from tweakjson.manifest_models import Library, Manifest
from tweakjson.repository_probe import ArtifactUrlResolver
from tweakjson.tweakjson_config import MINECRAFT_VERSION_PROPERTY, TweakjsonConfig
from tweakjson.tweakjson_exceptions import ConfigurationException
from tweakjson.tweakjson_logger import TweakjsonLogger
from tweakjson.tweakjson_utils import FileUtils, TimeUtils


class WriteStatus:
    """Enumeration of manifest write outcomes."""

    WRITTEN = "written"
    FAILED = "failed"


class WriteOutcome:
    """
    Result of writing the manifest to disk.
    """

    def __init__(
            self,
            output_path: str,
            status: str,
            error_message: Optional[str] = None,
    ):
        self.output_path = output_path
        self.status = status
        self.error_message = error_message

    def succeeded(self) -> bool:
        return self.status == WriteStatus.WRITTEN

    def __repr__(self) -> str:
        return f"WriteOutcome(path={self.output_path}, status={self.status})"


class ConfigurationDependencyPair:
    """
    A dependency declared on a configuration of some project.
    """

    def __init__(self, project_path: str, configuration: Configuration, dependency: Coordinate):
        self.project_path = project_path
        self.configuration = configuration
        self.dependency = dependency

    @property
    def key(self) -> str:
        return f"{self.project_path.rstrip(':')}:{self.configuration.name}|{self.dependency.key}"

    def __repr__(self) -> str:
        return f"ConfigurationDependencyPair({self.key})"


class ManifestAssembler:
    """
    Assembles the tweaker manifest for a build snapshot.

    Pipeline: collect candidate dependencies, filter them against the runtime
    classpath, resolve a URL for each, assemble and write the manifest.
    """

    def __init__(
        self,
        snapshot: BuildSnapshot,
        config: TweakjsonConfig,
        logger: TweakjsonLogger,
        url_resolver: Optional[ArtifactUrlResolver] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the manifest assembler.

        Args:
            snapshot: The exported build state
            config: tweakjson configuration
            logger: Logger for progress and error messages
            url_resolver: Resolver for artifact URLs; one probing the snapshot's
                repositories is created if omitted
            clock: Source of the manifest timestamp, ``datetime.now`` if omitted
        """
        self.snapshot = snapshot
        self.config = config
        self.logger = logger
        self._owns_resolver = url_resolver is None
        self.url_resolver = url_resolver or ArtifactUrlResolver(
            snapshot.repositories, logger, timeout=config.probe_timeout
        )
        self.clock = clock

    def __enter__(self) -> "ManifestAssembler":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        """Close the URL resolver if this assembler created it."""
        if self._owns_resolver:
            self.url_resolver.close()

    def collect_candidate_dependencies(
        self, root_project: Project, current_project: Project
    ) -> List[ConfigurationDependencyPair]:
        """
        Pair every dependency of every resolvable, non-internal configuration
        of both projects with its configuration.

        Resolution failures are not caught.

        Returns:
            Pairs in discovery order, without duplicates
        """
        internal = set(self.config.internal_configurations)
        pairs: Dict[str, ConfigurationDependencyPair] = {}

        projects = [root_project]
        if current_project.path != root_project.path:
            projects.append(current_project)

        for project in projects:
            for configuration in project.configurations:
                if configuration.name in internal or not configuration.can_be_resolved:
                    continue
                configuration.resolve()
                for declared in configuration.dependencies:
                    pair = ConfigurationDependencyPair(
                        project.path, configuration, declared.coordinate()
                    )
                    pairs.setdefault(pair.key, pair)

        self.logger.log(f"Found {len(pairs)} dependencies", logging.INFO)
        return list(pairs.values())

    def filter_to_runtime_artifacts(
        self, pairs: List[ConfigurationDependencyPair], runtime_classpath: List[str]
    ) -> Dict[str, Coordinate]:
        """
        Attribute each runtime classpath file to the first pair whose
        configuration resolves that file for the pair's dependency.

        Returns:
            Dependencies present on the runtime classpath, keyed by group:name:version
        """
        runtime_artifacts: Dict[str, Coordinate] = {}
        for path in runtime_classpath:
            owner = None
            for pair in pairs:
                if path in pair.configuration.files(pair.dependency):
                    owner = pair.dependency
                    break

            if owner is None:
                self.logger.log(
                    f"Found runtime artifact {path} but it's not in the dependency list",
                    logging.DEBUG,
                )
                continue

            runtime_artifacts.setdefault(owner.key, owner)
            self.logger.log(f"Found runtime artifact {owner.key}", logging.DEBUG)

        return runtime_artifacts

    def resolve_artifact_url(self, dependency: Coordinate) -> Optional[str]:
        return self.url_resolver.resolve(dependency)

    def build_libraries(self, runtime_artifacts: Dict[str, Coordinate]) -> List[Library]:
        """
        Sort the runtime artifacts by name and turn them into library entries.

        Artifacts without a group are dropped.
        """
        libraries = []
        for dep in sorted(runtime_artifacts.values(), key=lambda d: (d.name, d.key)):
            if not dep.group:
                self.logger.log(f"Group is null for {dep.name}", logging.INFO)
                continue
            libraries.append(Library(name=dep.notation, url=self.resolve_artifact_url(dep)))
        return libraries

    def assemble_manifest(self, mc_version: str, libraries: List[Library]) -> Manifest:
        timestamp = TimeUtils.current_timestamp(self.clock)
        return Manifest.for_version(mc_version, timestamp, libraries)

    def write_manifest(self, manifest: Manifest, output_path: str) -> WriteOutcome:
        """
        Write the manifest as pretty-printed JSON.

        Returns:
            WriteOutcome; I/O failures are logged and reported, never raised
        """
        try:
            FileUtils.write_json(output_path, manifest.to_launcher_dict())
        except OSError as e:
            error_msg = f"Failed to write manifest to {output_path}: {str(e)}"
            self.logger.log(error_msg, logging.ERROR)
            return WriteOutcome(output_path, WriteStatus.FAILED, error_msg)

        self.logger.log(f"Wrote manifest to {output_path}", logging.INFO)
        return WriteOutcome(output_path, WriteStatus.WRITTEN)

    def get_minecraft_version(self) -> str:
        """
        The configured version, falling back to the ``minecraft_version``
        property of the build.

        Raises:
            ConfigurationException: If neither is set
        """
        version = self.config.minecraft_version or self.snapshot.find_property(
            MINECRAFT_VERSION_PROPERTY
        )
        if not version:
            raise ConfigurationException(
                f"Could not get unknown property '{MINECRAFT_VERSION_PROPERTY}'; "
                "set it in the build or pass --minecraft-version"
            )
        return str(version)

    def build(self) -> Manifest:
        """
        Run the pipeline up to the in-memory manifest.

        Raises:
            ResolutionException: If a configuration cannot be resolved
            ConfigurationException: If no minecraft version is available
            SnapshotException: If the configured source set does not exist
        """
        self.logger.log("Assembling tweaker json", logging.INFO)
        mc_version = self.get_minecraft_version()
        root_project = self.snapshot.root_project
        current_project = self.snapshot.current_project

        pairs = self.collect_candidate_dependencies(root_project, current_project)
        runtime_classpath = current_project.runtime_classpath(self.config.source_set)
        runtime_artifacts = self.filter_to_runtime_artifacts(pairs, runtime_classpath)
        libraries = self.build_libraries(runtime_artifacts)

        summary = self.url_resolver.get_probe_summary()
        self.logger.log(
            f"Probe summary: {summary['found']} found, {summary['not_found']} not found, "
            f"{summary['error']} failed, {summary['skipped']} skipped",
            logging.INFO,
        )
        return self.assemble_manifest(mc_version, libraries)

    def run(self) -> WriteOutcome:
        """
        Run the whole pipeline and write the manifest to the configured output path.

        A resolver created by the assembler is closed afterwards, even on failure.
        """
        try:
            manifest = self.build()
        finally:
            self.close()
        return self.write_manifest(manifest, self.config.output_path)
