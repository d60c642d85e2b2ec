"""Sandboxed Jinja2 rendering of sign-in emails.

An email template is a subject, a plain text body and an HTML body. Only the
HTML body is autoescaped; subjects and text bodies are rendered verbatim.
"""

from dataclasses import dataclass

from jinja2 import StrictUndefined, Template, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from genpass.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EmailTemplate:
    """Jinja2 sources for one kind of email."""

    name: str
    subject: str
    text_body: str
    html_body: str


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    text_body: str
    html_body: str


class TemplateRenderer:
    """Render EmailTemplates in a sandbox.

    Compiled templates are cached per source string. Every variable a
    template uses must be supplied.
    """

    def __init__(self) -> None:
        options = {"undefined": StrictUndefined, "trim_blocks": True, "lstrip_blocks": True}
        self._text_env = SandboxedEnvironment(autoescape=False, **options)
        self._html_env = SandboxedEnvironment(autoescape=True, **options)
        self._compiled: dict[tuple[bool, str], Template] = {}

    def _compile(self, source: str, html: bool) -> Template:
        key = (html, source)
        template = self._compiled.get(key)
        if template is None:
            env = self._html_env if html else self._text_env
            template = self._compiled[key] = env.from_string(source)
        return template

    def render(self, template: EmailTemplate, variables: dict[str, str]) -> RenderedEmail:
        """Render all three parts of an email template.

        Raises:
            TemplateError: If a part fails to compile, references a missing
                variable or is blocked by the sandbox.
        """
        try:
            return RenderedEmail(
                subject=self._compile(template.subject, html=False).render(variables).strip(),
                text_body=self._compile(template.text_body, html=False).render(variables),
                html_body=self._compile(template.html_body, html=True).render(variables),
            )
        except TemplateError as e:
            logger.error("Email template failed to render", template=template.name, error=str(e))
            raise
