"""
Jira wiki markup to Slack mrkdwn translation.
"""

import re

# {code:java}...{code}, {noformat}...{noformat}, {quote}...{quote}, {panel:title=x}...{panel}
BLOCK_PATTERN = re.compile(r"\{(code|noformat|quote|panel)(?::[^}]*)?\}(.*?)\{\1\}", re.DOTALL)

HEADER_PATTERN = re.compile(r"^h[1-6]\.[ \t]+(.+?)[ \t]*$", re.MULTILINE)
LIST_ITEM_PATTERN = re.compile(r"^([#*]+|-) (.*)$")
MONOSPACE_PATTERN = re.compile(r"\{\{(.+?)\}\}")
COLOR_PATTERN = re.compile(r"\{color(?::[^}]*)?\}(.*?)\{color\}", re.DOTALL)
NAMED_LINK_PATTERN = re.compile(r"\[([^|\]\n]+)\|([^\]\n]+)\]")
BARE_LINK_PATTERN = re.compile(r"\[((?:https?|mailto|ftp):[^|\]\n]+)\]")
STRIKE_PATTERN = re.compile(r"(^|[\s(])-(\S(?:[^\n]*?\S)?)-(?=$|[\s.,;:!?)])", re.MULTILINE)
CITATION_PATTERN = re.compile(r"\?\?(.+?)\?\?")
# A {quote} or {noformat} marker left over once paired blocks are fenced
LONE_MARKER_PATTERN = re.compile(r"\{(?:quote|noformat)\}")

# Block bodies that are still prose and get inline translation
PROSE_BLOCKS = ("quote", "panel")


def _convert_lists(text: str) -> str:
    """Render Jira bullet (*, -) and numbered (#) lists, nesting by marker depth."""
    counters = {}
    lines = []
    for line in text.split("\n"):
        match = LIST_ITEM_PATTERN.match(line)
        if not match:
            counters.clear()
            lines.append(line)
            continue

        markers, content = match.groups()
        depth = len(markers)
        for level in [level for level in counters if level > depth]:
            del counters[level]

        if markers[-1] == "#":
            counters[depth] = counters.get(depth, 0) + 1
            bullet = f"{counters[depth]}."
        else:
            counters.pop(depth, None)
            bullet = "•"
        lines.append(f"{'  ' * (depth - 1)}{bullet} {content}")
    return "\n".join(lines)


def _convert_inline(text: str) -> str:
    if not text:
        return text
    text = LONE_MARKER_PATTERN.sub("```", text)
    text = COLOR_PATTERN.sub(r"\1", text)
    text = MONOSPACE_PATTERN.sub(r"`\1`", text)
    text = NAMED_LINK_PATTERN.sub(r"<\2|\1>", text)
    text = BARE_LINK_PATTERN.sub(r"<\1>", text)
    text = HEADER_PATTERN.sub(r"*\1*", text)
    text = _convert_lists(text)
    text = STRIKE_PATTERN.sub(r"\1~\2~", text)
    text = CITATION_PATTERN.sub(r"_-- \1_", text)
    return text


def jira_to_slack(text: str) -> str:
    """Translate Jira wiki markup into Slack mrkdwn.

    Block markers ({quote}, {code}, {noformat}, {panel}) become triple-backtick
    fences. Code and noformat bodies are copied verbatim; everything else gets
    the inline rules (monospace, headers, lists, links, strikethrough, colour
    and citations). A lone {quote} or {noformat} marker still becomes a fence,
    so a block cut short leaves the fences unbalanced.
    """
    if not text:
        return ""

    parts = []
    position = 0
    for match in BLOCK_PATTERN.finditer(text):
        parts.append(_convert_inline(text[position:match.start()]))
        kind, body = match.group(1), match.group(2)
        if kind in PROSE_BLOCKS:
            body = _convert_inline(body)
        parts.append(f"```{body}```")
        position = match.end()
    parts.append(_convert_inline(text[position:]))
    return "".join(parts)
