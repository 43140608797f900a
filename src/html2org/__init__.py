"""html2org - convert HTML documents to Org-mode markup.

html2org walks a BeautifulSoup tree and writes Emacs Org-mode text:
headings become outline headings, lists and quotes keep their structure,
links and images become Org links, tables become plain text or Org pipe
tables and HTML forms become ``#+begin_input`` blocks that refer back to
their form.

Key Features
------------
- Standards-compliant parsing with html5lib (``html.parser`` and ``lxml``
  selectable)
- Links resolved against a base URL, long ``data:`` URLs abbreviated
- Pretty Org tables laid out with rich
- ``<<target>>`` anchors for in-page link destinations
- Command line tool with configuration files and environment defaults

Requirements
------------
- Python 3.10+
- beautifulsoup4, html5lib, rich

Examples
--------
Basic usage:

    >>> from html2org import html_to_org
    >>> html_to_org('<h2>Intro</h2><p>See <a href="#usage">the usage notes</a>.</p>')
    '** Intro\\n\\nSee [[usage][the usage notes]].'

With options:

    >>> from html2org import Html2OrgOptions, from_string
    >>> options = Html2OrgOptions(pretty_tables=True)
    >>> print(from_string("<table><tr><th>a</th></tr><tr><td>1</td></tr></table>", options))
    | A |
    |---|
    | 1 |

"""

from html2org.api import (
    HtmlToOrgConverter,
    from_bytes,
    from_html_node,
    from_reader,
    from_string,
    html_to_org,
)
from html2org.exceptions import (
    DependencyError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    FormatError,
    Html2OrgError,
    InvalidOptionsError,
    LinkNormalizationError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from html2org.options import Html2OrgOptions, PrettyTablesOptions
from html2org.parsing import parse_html

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Conversion
    "HtmlToOrgConverter",
    "from_bytes",
    "from_html_node",
    "from_reader",
    "from_string",
    "html_to_org",
    "parse_html",
    # Options
    "Html2OrgOptions",
    "PrettyTablesOptions",
    # Errors
    "DependencyError",
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "FormatError",
    "Html2OrgError",
    "InvalidOptionsError",
    "LinkNormalizationError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
