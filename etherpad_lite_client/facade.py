# facade.py - one method per remote procedure of the Etherpad Lite API
from .request import HttpVerb

GET = HttpVerb.GET
POST = HttpVerb.POST


class EtherpadAPI:
    """
    Named wrappers over ``invoke``.

    Each method returns whatever ``invoke`` returns: the payload dict (empty
    for procedures without data) on a blocking client, an awaitable of it on
    the async client. Subclasses provide ``invoke(method, verb, arguments)``.
    """

    def invoke(self, method, verb, arguments=None):
        raise NotImplementedError

    # Groups
    # Group pads are private; access to them needs a session.

    def create_group(self):
        """Create a group; the id comes back under "groupID"."""
        return self.invoke("createGroup", POST)

    def create_group_if_not_exists_for(self, group_mapper):
        """Map an application group to an Etherpad group, creating it if needed."""
        return self.invoke("createGroupIfNotExistsFor", POST, {"groupMapper": group_mapper})

    def delete_group(self, group_id):
        return self.invoke("deleteGroup", POST, {"groupID": group_id})

    def list_pads(self, group_id):
        """Pad ids of a group, under "padIDs"."""
        return self.invoke("listPads", GET, {"groupID": group_id})

    def create_group_pad(self, group_id, pad_name, text=None):
        return self.invoke("createGroupPad", POST, {"groupID": group_id, "padName": pad_name, "text": text})

    # Authors
    # Authors carry the name and colour a user picked; the id is "authorID".

    def create_author(self, name=None):
        return self.invoke("createAuthor", POST, {"name": name})

    def create_author_if_not_exists_for(self, author_mapper, name=None):
        return self.invoke("createAuthorIfNotExistsFor", POST, {"authorMapper": author_mapper, "name": name})

    def list_pads_of_author(self, author_id):
        return self.invoke("listPadsOfAuthor", GET, {"authorID": author_id})

    def list_authors_of_pad(self, pad_id):
        return self.invoke("listAuthorsOfPad", GET, {"padID": pad_id})

    # Sessions

    def create_session(self, group_id, author_id, valid_until):
        """
        Open a session for an author in a group.

        ``valid_until`` is an absolute UNIX timestamp in seconds; see
        ``sessions.hours_from_now`` and ``sessions.to_unix_seconds``.
        The id comes back under "sessionID".
        """
        return self.invoke("createSession", POST, {
            "groupID": group_id,
            "authorID": author_id,
            "validUntil": int(valid_until),
        })

    def delete_session(self, session_id):
        return self.invoke("deleteSession", POST, {"sessionID": session_id})

    def get_session_info(self, session_id):
        """authorID, groupID and validUntil of a session."""
        return self.invoke("getSessionInfo", GET, {"sessionID": session_id})

    def list_sessions_of_group(self, group_id):
        return self.invoke("listSessionsOfGroup", GET, {"groupID": group_id})

    def list_sessions_of_author(self, author_id):
        return self.invoke("listSessionsOfAuthor", GET, {"authorID": author_id})

    # Pad content

    def get_text(self, pad_id, rev=None):
        """Pad text under "text"; latest revision unless ``rev`` is given."""
        return self.invoke("getText", GET, {"padID": pad_id, "rev": rev})

    def set_text(self, pad_id, text):
        return self.invoke("setText", POST, {"padID": pad_id, "text": text})

    def get_html(self, pad_id, rev=None):
        return self.invoke("getHTML", GET, {"padID": pad_id, "rev": rev})

    def set_html(self, pad_id, html):
        return self.invoke("setHTML", POST, {"padID": pad_id, "html": html})

    # Pads
    # Group pads are named GROUPID$PADNAME; plain pads may not contain '$'.

    def create_pad(self, pad_id, text=None):
        return self.invoke("createPad", POST, {"padID": pad_id, "text": text})

    def get_revisions_count(self, pad_id):
        return self.invoke("getRevisionsCount", GET, {"padID": pad_id})

    def delete_pad(self, pad_id):
        return self.invoke("deletePad", POST, {"padID": pad_id})

    def get_read_only_id(self, pad_id):
        return self.invoke("getReadOnlyID", GET, {"padID": pad_id})

    def set_public_status(self, pad_id, public_status):
        """Group pads only; booleans go on the wire as true/false."""
        return self.invoke("setPublicStatus", POST, {"padID": pad_id, "publicStatus": public_status})

    def get_public_status(self, pad_id):
        return self.invoke("getPublicStatus", GET, {"padID": pad_id})

    def set_password(self, pad_id, password):
        return self.invoke("setPassword", POST, {"padID": pad_id, "password": password})

    def is_password_protected(self, pad_id):
        return self.invoke("isPasswordProtected", GET, {"padID": pad_id})
