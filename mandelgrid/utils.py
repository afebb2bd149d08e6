# mandelgrid/utils.py

def parse_complex(s: str) -> complex:
    """
    Parse the fixed Julia parameter c from a CLI flag or YAML value.

    Accepts Python complex literals ('-0.4+0.6j', '0.285J') and bare reals
    ('-0.8'), ignoring case and spaces. Raises ValueError otherwise.
    """
    s = s.strip().lower().replace(" ", "")
    if s.endswith("j"):
        return complex(s)
    return complex(float(s), 0.0)
