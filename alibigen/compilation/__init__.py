from alibigen.compilation.artifact import CompilationArtifact
from alibigen.compilation.compiler import build_cnf
from alibigen.compilation.context import CompilationContext

__all__ = ["CompilationArtifact", "CompilationContext", "build_cnf"]
