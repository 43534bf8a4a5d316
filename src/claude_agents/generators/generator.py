"""Template-based agent generation."""

import logging
import os
from typing import Any, Iterable, Optional

from claude_agents.core.config import AgentsConfig
from claude_agents.core.constants import DEFAULT_AUTHOR, DEFAULT_VERSION, ModelType
from claude_agents.core.exceptions import NotFoundError
from claude_agents.generators.templates import DEFAULT_TEMPLATE, TEMPLATES, AgentTemplate
from claude_agents.models.agent import AgentExample, AgentMetadata, AgentRecord

logger = logging.getLogger(__name__)


class AgentGenerator:
    """Generates new agent records from templates."""

    def __init__(
        self,
        config: Optional[AgentsConfig] = None,
        templates: Optional[dict[str, AgentTemplate]] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            config: Supplies the default model and author.
            templates: Template registry. Uses the built-in templates if None.
        """
        self.config = config or AgentsConfig()
        self.templates = templates if templates is not None else TEMPLATES

    def generate(
        self,
        name: str,
        description: Optional[str] = None,
        model: Optional[str] = None,
        template_name: Optional[str] = None,
        examples: Optional[Iterable[AgentExample | dict[str, Any]]] = None,
        author: Optional[str] = None,
    ) -> AgentRecord:
        """Generate a new agent record.

        Args:
            name: Agent name, used as given.
            description: Agent description. Falls back to the template's
                default description. The metadata keeps it verbatim.
            model: Model tier. Defaults to the configured default model.
            template_name: Template key. Unknown keys fall back to ``general``.
            examples: Example pairs rendered into an ``## Examples`` section.
            author: Author. Falls back to config, then $USER, then ``unknown``.

        Returns:
            A new record without a path.
        """
        template = self.get_template(template_name or DEFAULT_TEMPLATE)
        description = description or template.default_description
        example_list = [_as_example(e) for e in examples or ()]

        if isinstance(model, ModelType):
            model = model.value

        metadata = AgentMetadata(
            name=name,
            description=description,
            model=model or self.config.settings.default_model,
            version=DEFAULT_VERSION,
            author=author or self.config.author or os.environ.get("USER") or DEFAULT_AUTHOR,
            tags=list(template.tags),
        )

        logger.debug(f"Generating agent '{name}' from template '{template.name}'")
        content = self._render_content(template, name, description, example_list)
        return AgentRecord(metadata=metadata, content=content)

    def get_template(self, template_name: str) -> AgentTemplate:
        """Look up a template, falling back to the default template."""
        template = self.templates.get(template_name)
        if template is None:
            logger.debug(f"Unknown template '{template_name}', using '{DEFAULT_TEMPLATE}'")
            template = self.templates[DEFAULT_TEMPLATE]
        return template

    def list_templates(self) -> list[str]:
        """Names of available templates."""
        return list(self.templates)

    def get_template_info(self, template_name: str) -> dict[str, Any]:
        """Name, description and tags of a template.

        Raises:
            NotFoundError: If the template does not exist.
        """
        template = self.templates.get(template_name)
        if template is None:
            raise NotFoundError(template_name, kind="Template")
        return template.info()

    def _render_content(
        self,
        template: AgentTemplate,
        name: str,
        description: str,
        examples: list[AgentExample],
    ) -> str:
        # Replaced in this order; see substitute
        values = {
            "name": name,
            "description": description,
            "domain": template.domain,
        }
        content = substitute(template.content, values)

        for section in template.sections:
            content += f"\n\n## {section.title}\n\n{section.content}"

        if examples:
            content += "\n\n## Examples\n"
            for example in examples:
                content += f"\n### Input:\n{example.input}\n\n### Output:\n{example.output}\n"

        return content


def substitute(text: str, values: dict[str, str]) -> str:
    """Replace ``{{key}}`` placeholders, one key at a time in ``values`` order.

    A value may introduce placeholders for keys replaced later, so a
    default description mentioning ``{{domain}}`` is resolved in the body.
    Keys already replaced are not revisited. Unknown placeholders are left
    as they are.
    """
    for key, value in values.items():
        text = text.replace(f"{{{{{key}}}}}", value)
    return text


def _as_example(value: AgentExample | dict[str, Any]) -> AgentExample:
    if isinstance(value, AgentExample):
        return value
    return AgentExample.from_dict(value)
