"""Find Vimeo HLS streams, copy them to MP4 with ffmpeg and report on batches."""

__version__ = "0.1.0"