"""
coursebrowser – load a JSON course catalog, filter/sort it and inspect courses.
"""
