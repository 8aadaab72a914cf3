"""pxb collaborators - process runner, prompter, filesystem, and the Toolbox."""

from pxblue_cli.toolbox.context import Toolbox, create_toolbox
from pxblue_cli.toolbox.filesystem import ProjectFilesystem
from pxblue_cli.toolbox.process import ProcessRunner
from pxblue_cli.toolbox.prompt import Prompter, PromptRequest, RichPrompter

__all__ = [
    "ProcessRunner",
    "ProjectFilesystem",
    "PromptRequest",
    "Prompter",
    "RichPrompter",
    "Toolbox",
    "create_toolbox",
]
