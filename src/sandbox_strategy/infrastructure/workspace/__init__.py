from .materializer import WorkspaceFileMaterializer

__all__ = ["WorkspaceFileMaterializer"]
