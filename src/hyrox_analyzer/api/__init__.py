"""HTTP API for the HYROX Analyzer."""
