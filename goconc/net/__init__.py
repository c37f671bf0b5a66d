"""Namespace for networking; it currently contains no modules."""