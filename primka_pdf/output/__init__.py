from .sinks import DirectorySink, DocumentSink, MemorySink, output_filename

__all__ = ["DirectorySink", "DocumentSink", "MemorySink", "output_filename"]
