"""
Ownership checks for posts and comments.

Ownership is the only authorization axis: there are no roles and no
staff override. A post's author does not gain rights over comments
other people leave on it.
"""


def is_authenticated(actor):
    return actor is not None and actor.is_authenticated


def is_owner(actor, resource):
    """Return True if `actor` wrote `resource` (anything with `author_id`)."""
    return is_authenticated(actor) and actor.pk == resource.author_id


def can_create_post(actor):
    return is_authenticated(actor)


def can_change_post(actor, post):
    return is_owner(actor, post)


def can_delete_post(actor, post):
    return is_owner(actor, post)


def can_comment(actor):
    return is_authenticated(actor)


def can_delete_comment(actor, comment):
    return is_owner(actor, comment)
