"""Default feed template and bootstrapping it on disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from textwrap import dedent

DEFAULT_TEMPLATE_FILENAME = "feed.template.xml"


def get_default_template() -> str:
    """Get the default RSS 2.0 template content.

    Returns:
        Template with channel placeholders and an item stamp.
    """
    return dedent("""\
        <?xml version="1.0" encoding="UTF-8"?>
        <rss version="2.0" xmlns:content="http://purl.org/rss/1.0/modules/content/">
          <channel>
            <title>{{Title}}</title>
            <link>{{Link}}</link>
            <description>{{Description}}</description>
            <lastBuildDate>{{LastBuildDate}}</lastBuildDate>

            <Items>
              <item>
                <title>{{Item.Title}}</title>
                <link>{{Item.Link}}</link>
                <guid isPermaLink="true">{{Item.Guid}}</guid>
                <pubDate>{{Item.PubDate}}</pubDate>
                <description><![CDATA[{{Item.Description}}]]></description>
                {{Item.CategoriesXml}}
                {{Item.ContentEncoded}}
              </item>
            </Items>
          </channel>
        </rss>
        """)


@dataclass
class TemplateInitResult:
    """Result of writing a template file."""

    template_path: Path
    overwritten: bool = False


def create_default_template(template_path: Path, force: bool = False) -> TemplateInitResult:
    """Write the default template, creating parent directories.

    Args:
        template_path: Where to write the template.
        force: Overwrite an existing file.

    Returns:
        TemplateInitResult describing what was written.

    Raises:
        FileExistsError: If the file exists and ``force`` is False.
    """
    existed = template_path.exists()
    if existed and not force:
        raise FileExistsError(f"Template file already exists: {template_path}")

    template_path.parent.mkdir(parents=True, exist_ok=True)
    template_path.write_text(get_default_template(), encoding="utf-8")

    return TemplateInitResult(template_path=template_path, overwritten=existed)
