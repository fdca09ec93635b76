def tokenize(text: str) -> list[str]:
    """Split source text into parenthesis tokens and whitespace-delimited atoms."""
    return text.replace("(", " ( ").replace(")", " ) ").split()
