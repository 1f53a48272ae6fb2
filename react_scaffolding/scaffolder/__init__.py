"""react-scaffolding scaffolder -- base project creation and file templating.

Quick usage::

    from react_scaffolding.config import Config
    from react_scaffolding.scaffolder import NpmClient, ProjectGenerator

    config = Config(project_name="my-react-app")
    project_path = await ProjectGenerator(config, NpmClient()).generate()
"""

from react_scaffolding.scaffolder.generator import ProjectGenerator
from react_scaffolding.scaffolder.npm import NpmClient
from react_scaffolding.scaffolder.templates import TemplateRenderer

__all__ = [
    "NpmClient",
    "ProjectGenerator",
    "TemplateRenderer",
]
