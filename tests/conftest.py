import os

# charts are only written to files
os.environ.setdefault("MPLBACKEND", "Agg")
