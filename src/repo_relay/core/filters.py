"""Relevance filtering for announced repositories."""

# Quantized or converted re-uploads; matched as plain substrings.
DENYLIST: frozenset[str] = frozenset({
    "gguf",
    "gptq",
    "awq",
    "exl3",
    "exl2",
    "fp8",
    "mlx",
    "mxfp4",
    "nvfp4",
    "bnb-4bit",
    "bnb-8bit",
})


def is_relevant(subject_id: str, denylist: frozenset[str] = DENYLIST) -> bool:
    """
    Check if a repository should be announced.
    
    Args:
        subject_id: Namespaced repository id, e.g. "acme/small-model"
        denylist: Keywords that mark a repository as not worth announcing
        
    Returns:
        False if any denylist keyword occurs anywhere in the id (case-insensitive)
    """
    name = subject_id.lower()
    return not any(keyword in name for keyword in denylist)
