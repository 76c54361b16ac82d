"""
Application-wide constants.
"""


# Edit history action codes, paired 1:1 with an activity name
class ActionType:
    CREATE = 'create'
    UPDATE = 'update'
    DRAFT = 'draft'
    DELETE = 'delete'

    CHOICES = [
        (CREATE, 'Create'),
        (UPDATE, 'Update'),
        (DRAFT, 'Draft'),
        (DELETE, 'Delete'),
    ]

    ACTIVITY_NAMES = {
        CREATE: 'Post Created',
        UPDATE: 'Post Updated',
        DRAFT: 'Post Drafted',
        DELETE: 'Post Deleted',
    }


# Content lifecycle transitions reported by the host
class LifecycleKind:
    CREATED = 'created'
    UPDATED = 'updated'
    DELETED = 'deleted'

    ALL = (CREATED, UPDATED, DELETED)


# Content statuses
class PostStatus:
    DRAFT = 'draft'
    PENDING = 'pending'
    PUBLISH = 'publish'
    PRIVATE = 'private'

    CHOICES = [
        (DRAFT, 'Draft'),
        (PENDING, 'Pending Review'),
        (PUBLISH, 'Published'),
        (PRIVATE, 'Private'),
    ]


# Content types
class PostType:
    POST = 'post'
    PAGE = 'page'
    REVISION = 'revision'

    CHOICES = [
        (POST, 'Post'),
        (PAGE, 'Page'),
        (REVISION, 'Revision'),
    ]


LOCATION_NOT_FOUND = 'Location not found'
UNKNOWN_USER = 'Unknown User'
