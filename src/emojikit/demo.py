# src/emojikit/demo.py
import argparse
import json
import sys

from dotenv import load_dotenv


def _describe(emoji):
    return {"emoji": emoji.grapheme, "identifier": emoji.identifier, "name": emoji.name}


def _flag(code):
    from .text import country_flag, regional_flag

    # "GB-ENG" style codes are subdivisions, two letters are countries
    if "-" in code or len(code) != 2:
        return regional_flag(code)
    return country_flag(code)


def main(argv=None):
    """CLI demo: substitute :aliases: in text, look up an alias, build a flag or list a group."""
    from .emojis import get_catalog
    from .text import parse_alias, parse_text, suggest_aliases
    from .utils.log import debug, reload_topics

    parser = argparse.ArgumentParser(
        prog="emojikit-demo",
        description="Replace :aliases: in text with emoji, look up aliases, build flags.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to convert (e.g. Ship it :rocket: :+1:)",
    )
    parser.add_argument("--alias", metavar="NAME", help="Look up a single alias (e.g. +1)")
    parser.add_argument("--flag", metavar="CODE", help="Build a flag (e.g. EU or GB-SCT)")
    parser.add_argument("--group", metavar="NAME", help="List the emoji of a group (e.g. 'Food & Drink')")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)

    # .env may set EMOJIKIT_DATA_DIR / EMOJIKIT_DEBUG_TOPICS; real env wins
    load_dotenv()
    # --debug switches every topic on for this run only
    reload_topics("all" if args.debug else None)

    asked = args.alias is not None or args.flag is not None or args.group is not None
    text = " ".join(args.text) or ("" if asked else "Hello :wave: ship it :rocket: :+1:")

    try:
        result = {}
        if text:
            result["text"] = parse_text(text)
            debug(f"text: {text!r} -> {result['text']!r}", topic="demo")
        if args.alias is not None:
            emoji = parse_alias(args.alias)
            if emoji is None:
                hints = suggest_aliases(args.alias)
                hint = f" (did you mean: {', '.join(hints)}?)" if hints else ""
                raise LookupError(f"Unknown alias {args.alias!r}{hint}")
            result["alias"] = _describe(emoji)
        if args.flag is not None:
            result["flag"] = _flag(args.flag)
        if args.group is not None:
            group = get_catalog().group(args.group)
            debug(f"group {group.name!r}: {len(group.subgroups)} subgroups", topic="demo")
            result["group"] = [_describe(e) for e in group.base_emojis()]
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if args.debug:
            reload_topics()

    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
        return
    if "text" in result:
        print(result["text"])
    if "alias" in result:
        a = result["alias"]
        print(f"{a['emoji']}  {a['identifier']}  ({a['name']})")
    if "flag" in result:
        print(result["flag"])
    for item in result.get("group", []):
        print(f"{item['emoji']}  {item['identifier']}")


if __name__ == "__main__":
    main()
