"""
Slack Message Formatter

Builds the reply text for the /justin command: a search link for the
user's text with a short greeting in front of it.
"""

from urllib.parse import quote

DEFAULT_SEARCH_URL_TEMPLATE = "https://www.google.com/#q={query}"


def build_search_url(text: str, template: str = DEFAULT_SEARCH_URL_TEMPLATE) -> str:
    """
    Build a search link for the given text.

    The text is trimmed and percent-encoded with no safe characters, so
    spaces become `%20` and `&`, `#`, `/` cannot break out of the query.

    Args:
        text: Free text typed after the slash command
        template: URL template with a `{query}` placeholder

    Returns:
        Search URL
    """
    return template.format(query=quote(text.strip(), safe=""))


def format_search_reply(
    user_name: str,
    text: str,
    template: str = DEFAULT_SEARCH_URL_TEMPLATE
) -> str:
    """
    Format the reply text for a search request.

    Questions (text ending with `?`, checked before trimming) get a
    different greeting than plain requests.

    Args:
        user_name: Slack username of the invoking user
        text: Raw text typed after the slash command
        template: URL template passed to build_search_url

    Returns:
        Reply text for Slack
    """
    found = f"Here's what I found:\n\n{build_search_url(text, template)}"
    if text.endswith("?"):
        return f"Great question, @{user_name}! {found}"
    return f"You got it, @{user_name}! {found}"
