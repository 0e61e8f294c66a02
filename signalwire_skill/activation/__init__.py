from .matcher import Activation, ActivationMatcher, compile_term

__all__ = ["Activation", "ActivationMatcher", "compile_term"]
