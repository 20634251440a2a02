from rest_framework.parsers import JSONParser


class MergePatchJSONParser(JSONParser):
    """JSON merge patch bodies (RFC 7396) used by PATCH requests."""
    
    media_type = 'application/merge-patch+json'
