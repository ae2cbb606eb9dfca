"""
Utility functions for the word aligner.
"""


def build_config_from_args(args):
    """Build the align() config dict from an argparse Namespace.

    Returns: config_dict
    """
    config = {
        "match": getattr(args, "match", None),
        "mismatch": getattr(args, "mismatch", None),
        "deletion": getattr(args, "deletion", None),
        "insertion": getattr(args, "insertion", None),
        "clamp_at_zero": getattr(args, "clamp", None) or None,
        "style": getattr(args, "style", None),
        "context_size": getattr(args, "context", None),
    }

    # Remove None values to avoid overriding defaults
    return {k: v for k, v in config.items() if v is not None}
