"""Application context with dependency injection.

The DatafaceContext dataclass holds every integration (git, HTTP, package
manager, clock, feedback) plus the registry client and component fetcher
built on top of them. It is created once at the CLI entry point and threaded
through commands via Click's context object.
"""

from dataclasses import dataclass
from pathlib import Path

from dataface.core.fetcher import ComponentFetcher, GitFetchStrategy, PackageFetchStrategy
from dataface.core.git.abc import Git
from dataface.core.http.abc import RegistryHttp
from dataface.core.package_manager.abc import PackageManager
from dataface.core.registry.client import RegistryCache, RegistryClient
from dataface.core.registry.sources import PackageRegistrySource, RemoteRegistrySource
from dataface.core.time.abc import Time
from dataface.core.user_feedback import UserFeedback


def _build_services(
    git: Git,
    http: RegistryHttp,
    package_manager: PackageManager,
    time: Time,
) -> tuple[RegistryClient, ComponentFetcher]:
    registry = RegistryClient(
        sources=[
            RemoteRegistrySource(http),
            PackageRegistrySource(package_manager, time),
        ],
        cache=RegistryCache(),
    )
    fetcher = ComponentFetcher(
        registry,
        strategies=[
            GitFetchStrategy(git, registry, time),
            PackageFetchStrategy(package_manager, registry, time),
        ],
    )
    return registry, fetcher


@dataclass(frozen=True)
class DatafaceContext:
    """Immutable context holding all dependencies for dataface operations.

    Frozen to prevent accidental modification at runtime. The registry cache
    inside `registry` is the only state that changes, and only once.

    Attributes:
        git: Git integration used by the sparse-clone fetch strategy
        http: HTTP integration used to download the registry index
        package_manager: npm/yarn/pnpm integration
        time: Clock used to name temporary scopes and backups
        feedback: User-facing progress output
        registry: Registry client (owns the per-invocation registry cache)
        fetcher: Component source fetcher with its strategy chain
        cwd: Current working directory at CLI invocation
        debug: Keep tracebacks and show debug logging
    """

    git: Git
    http: RegistryHttp
    package_manager: PackageManager
    time: Time
    feedback: UserFeedback
    registry: RegistryClient
    fetcher: ComponentFetcher
    cwd: Path
    debug: bool

    @staticmethod
    def for_test(
        git: Git | None = None,
        http: RegistryHttp | None = None,
        package_manager: PackageManager | None = None,
        time: Time | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
        debug: bool = False,
    ) -> "DatafaceContext":
        """Create test context with optional pre-configured fakes.

        Unspecified integrations default to empty fakes, so nothing touches
        the network or spawns subprocesses. The registry client and fetcher
        are wired on top of whatever integrations end up in the context.

        Example:
            >>> http = FakeRegistryHttp(responses={REGISTRY_URL: registry_json})
            >>> git = FakeGit(repo_files={"packages/registry/src/button/...": "..."})
            >>> ctx = DatafaceContext.for_test(git=git, http=http, cwd=tmp_path)
        """
        from tests.fakes.git import FakeGit
        from tests.fakes.http import FakeRegistryHttp
        from tests.fakes.package_manager import FakePackageManager
        from tests.fakes.time import FakeTime
        from tests.fakes.user_feedback import FakeUserFeedback

        resolved_git: Git = git if git is not None else FakeGit()
        resolved_http: RegistryHttp = http if http is not None else FakeRegistryHttp()
        resolved_package_manager: PackageManager = (
            package_manager if package_manager is not None else FakePackageManager()
        )
        resolved_time: Time = time if time is not None else FakeTime()
        resolved_feedback: UserFeedback = feedback if feedback is not None else FakeUserFeedback()
        resolved_cwd: Path = cwd if cwd is not None else Path("/test/default/cwd")

        registry, fetcher = _build_services(
            resolved_git, resolved_http, resolved_package_manager, resolved_time
        )
        return DatafaceContext(
            git=resolved_git,
            http=resolved_http,
            package_manager=resolved_package_manager,
            time=resolved_time,
            feedback=resolved_feedback,
            registry=registry,
            fetcher=fetcher,
            cwd=resolved_cwd,
            debug=debug,
        )


def create_context(*, debug: bool) -> DatafaceContext:
    """Create production context with real implementations.

    Called once at CLI entry point to create the context for the entire
    command execution.
    """
    from dataface.core.git.real import RealGit
    from dataface.core.http.real import RealRegistryHttp
    from dataface.core.package_manager.real import RealPackageManager
    from dataface.core.time.real import RealTime
    from dataface.core.user_feedback import InteractiveFeedback

    git = RealGit()
    http = RealRegistryHttp()
    package_manager = RealPackageManager()
    time = RealTime()
    registry, fetcher = _build_services(git, http, package_manager, time)

    return DatafaceContext(
        git=git,
        http=http,
        package_manager=package_manager,
        time=time,
        feedback=InteractiveFeedback(),
        registry=registry,
        fetcher=fetcher,
        cwd=Path.cwd(),
        debug=debug,
    )
