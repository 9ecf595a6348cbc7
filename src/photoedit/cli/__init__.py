"""Photo editor command line interface"""
