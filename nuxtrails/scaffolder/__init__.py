"""nuxtrails scaffolder -- generates Nuxt resources and new projects.

Each generator renders Jinja2 templates for one ``ModelSpec`` into a
``GeneratedFileSet`` and flushes it under the configured project root.

Quick usage::

    from nuxtrails.config import Config
    from nuxtrails.parser import build_model_spec
    from nuxtrails.scaffolder import RouteGenerator

    spec = build_model_spec("post", ["title:string"])
    await RouteGenerator(Config(project_root=root)).generate(spec)
"""

from nuxtrails.scaffolder.client_gen import ClientAccessorGenerator
from nuxtrails.scaffolder.components_gen import ComponentGenerator
from nuxtrails.scaffolder.fileset import GeneratedFileSet
from nuxtrails.scaffolder.generator import ResourceGenerator
from nuxtrails.scaffolder.pages_gen import PageGenerator
from nuxtrails.scaffolder.project_gen import ProjectInitializer
from nuxtrails.scaffolder.routes_gen import RouteGenerator
from nuxtrails.scaffolder.store_gen import StoreGenerator
from nuxtrails.scaffolder.templates import TemplateRenderer

__all__ = [
    "ClientAccessorGenerator",
    "ComponentGenerator",
    "GeneratedFileSet",
    "PageGenerator",
    "ProjectInitializer",
    "ResourceGenerator",
    "RouteGenerator",
    "StoreGenerator",
    "TemplateRenderer",
]
