import matplotlib

# Tests write figures to files only
matplotlib.use("Agg")
