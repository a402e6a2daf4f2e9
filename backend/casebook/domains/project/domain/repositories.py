"""Project repository contract."""
from casebook.domains.project.domain.entities import Project
from casebook.shared_kernel.capabilities import Adder, Deleter, ReaderUpdater


class ProjectRepository(Adder[Project], ReaderUpdater[Project], Deleter):
    """Full store surface needed by the project operations."""
