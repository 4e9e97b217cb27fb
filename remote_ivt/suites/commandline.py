"""Command-line IVT suite.

Proves a runtime build works end to end on a Linux host:

1. Point maven at the repository under test (``~/.m2/settings.xml``)
2. Download the runtime zip and unpack ``voras-boot.jar`` from it
3. Run the core IVT through the boot jar and check it exits 0

Every remote command writes its own log, which is archived as evidence
whether or not the command succeeded.
"""

import logging
import re
import shlex
from typing import TYPE_CHECKING

from remote_ivt.errors import StepFailedError
from remote_ivt.models import CommandResult, CommandSpec, LogFile, StepReport
from remote_ivt.services.runner import CommandRunner
from remote_ivt.suites.skeletons import render_skeleton

if TYPE_CHECKING:
    from remote_ivt.context import TestContext

logger = logging.getLogger(__name__)

RUNTIME_GROUP = "dev.voras"
DEPENDENCY_PLUGIN = "org.apache.maven.plugins:maven-dependency-plugin:2.8:get"
BOOT_JAR = "voras-boot.jar"
CORE_IVT = "dev.voras.ivt.core/dev.voras.ivt.core.CoreManagerIVT"
SETTINGS_PATH = ".m2/settings.xml"
VERSION_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9._+-]*")


class CommandLineIVT:
    """Download the runtime and run the core IVT from the command line."""

    def __init__(self, context: "TestContext", runner: CommandRunner | None = None) -> None:
        self.context = context
        self.runner = runner or context.runner()

    @property
    def version(self) -> str:
        version = self.context.config.runtime_version
        if not VERSION_PATTERN.fullmatch(version):
            raise ValueError(
                f"Invalid runtime version {version!r}, check REMOTE_IVT_RUNTIME_VERSION"
            )
        return version

    @property
    def repository(self) -> str:
        repository = self.context.config.maven_repository
        if not repository:
            raise ValueError(
                "No maven repository configured, set REMOTE_IVT_MAVEN_REPOSITORY"
            )
        return repository

    def runtime_zip_path(self) -> str:
        """Path of the runtime zip in the remote user's local maven repository."""
        group_path = RUNTIME_GROUP.replace(".", "/")
        return (
            f".m2/repository/{group_path}/runtime/{self.version}/"
            f"runtime-{self.version}.zip"
        )

    def download_spec(self) -> CommandSpec:
        return CommandSpec(
            command_line=(
                f"mvn -B {DEPENDENCY_PLUGIN} "
                f"-Dartifact={RUNTIME_GROUP}:runtime:{self.version}:zip > mvn.log"
            ),
            marker_name="maven-rc",
            log_files=(LogFile("mvn.log", "mvn.log"),),
        )

    def unzip_spec(self) -> CommandSpec:
        return CommandSpec(
            command_line=f"unzip -o {shlex.quote(self.runtime_zip_path())} > unzip.log",
            marker_name="zip-rc",
            log_files=(LogFile("unzip.log", "unzip.log"),),
        )

    def core_ivt_spec(self) -> CommandSpec:
        obr = f"mvn:{RUNTIME_GROUP}/{RUNTIME_GROUP}.%s.obr/{self.version}/obr"
        parts = [
            "java",
            f"-jar {BOOT_JAR}",
            f"--remotemaven {shlex.quote(self.repository)}",
            f"--obr {obr % 'uber'}",
            f"--obr {obr % 'ivt'}",
            f"--test {CORE_IVT}",
            "--trace",
            "> coreivt.log",
        ]
        return CommandSpec(
            command_line=" ".join(parts),
            marker_name="voras-boot-rc",
            log_files=(LogFile("coreivt.log", "coreivt.log"),),
        )

    async def _step(self, name: str, spec: CommandSpec) -> StepReport:
        result: CommandResult = await self.runner.run(self.context.session, spec)
        if not result.succeeded:
            tail = result.raw_output.strip().splitlines()[-5:]
            logger.error("Step %s failed, last output:\n%s", name, "\n".join(tail))
            raise StepFailedError(name, result)
        return StepReport(name=name, result=result)

    async def setup_m2(self) -> StepReport:
        """Write ``~/.m2/settings.xml`` pointing maven at the repository under test."""
        content = render_skeleton("settings.xml", {"vorasrepo": self.repository})
        await self.context.session.put_file(SETTINGS_PATH, content.encode("utf-8"))
        logger.info("Maven settings written to %s", SETTINGS_PATH)
        return StepReport(name="setup_m2")

    async def setup_boot(self) -> list[StepReport]:
        """Download the runtime zip and extract the boot jar."""
        reports = [await self._step("download_runtime", self.download_spec())]
        logger.info("Runtime successfully downloaded")

        reports.append(await self._step("unzip_runtime", self.unzip_spec()))
        logger.info("%s unzipped", BOOT_JAR)
        return reports

    async def run_core_ivt(self) -> StepReport:
        """Run the core IVT through the boot jar."""
        spec = self.core_ivt_spec()
        logger.info("About to issue the command:\n%s", spec.command_line)
        report = await self._step("core_ivt", spec)
        logger.info("Core IVT passed in %.0fs", report.result.duration if report.result else 0)
        return report

    async def run(self) -> list[StepReport]:
        """Run setup steps in order, then the core IVT.

        Returns:
            One report per completed step

        Raises:
            StepFailedError: At the first step whose command does not exit 0
            ExecutionError: If the session drops or a log cannot be archived
        """
        reports = [await self.setup_m2()]
        reports.extend(await self.setup_boot())
        reports.append(await self.run_core_ivt())
        logger.info("All %d steps passed", len(reports))
        return reports
