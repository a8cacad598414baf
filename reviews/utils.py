from difflib import unified_diff

from diff_match_patch import diff_match_patch

LANGUAGE_EXTENSIONS = {
    "python": ".py", "javascript": ".js", "typescript": ".ts", "java": ".java", "c++": ".cpp",
    "go": ".go", "rust": ".rs", "ruby": ".rb", "php": ".php", "c#": ".cs",
}


def snippet_filename(language: str) -> str:
    return "snippet" + LANGUAGE_EXTENSIONS.get(language.lower(), ".txt")


def rewrite_patch(original: str, rewritten: str) -> str:
    """diff-match-patch patch text turning ``original`` into ``rewritten``."""
    if not rewritten:
        return ""
    dmp = diff_match_patch()
    return dmp.patch_toText(dmp.patch_make(original, rewritten))


def rewrite_unified_diff(original: str, rewritten: str, filename="snippet") -> str:
    if not rewritten:
        return ""
    return "\n".join(
        unified_diff(
            original.splitlines(),
            rewritten.splitlines(),
            fromfile=filename,
            tofile=filename + ".rewritten",
            lineterm="",
        )
    )
