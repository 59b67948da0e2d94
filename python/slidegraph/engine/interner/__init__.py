from slidegraph.engine.interner.interner import Interner

__all__ = ["Interner"]
