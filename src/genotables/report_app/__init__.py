"""NiceGUI viewer for the genotables report."""
