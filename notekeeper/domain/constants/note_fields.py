"""Constants for Note document field names"""


class NoteFields:
    """Field name constants for the notes collection"""
    TITLE = "title"
    CONTENT = "content"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    
    # Aggregate output
    TOTAL_NOTES = "totalNotes"
    AVG_CONTENT_LENGTH = "avgContentLength"
