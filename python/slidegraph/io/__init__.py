from slidegraph.io.loader import load_specification, loads, parse_specification

__all__ = ["load_specification", "loads", "parse_specification"]
