from slidegraph.engine.movegen.generator import MoveGenerator, Slide

__all__ = ["MoveGenerator", "Slide"]
