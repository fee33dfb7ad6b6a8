class TokenList:
    """
    The metadata and tokens of a book, a read only pair of tuples,
    ie. metadata, tokens = TokenList([Metadata.title("t")], [LINE_BREAK])
    gives metadata == (Metadata.title("t"),) and tokens == (LINE_BREAK,).

    The tuples are shared, not copied, by everyone holding the
    TokenList or any of its parts, ie. tl.tokens is tl.tokens and
    copy.copy(tl).tokens is tl.tokens.
    """

    __slots__ = ("_metadata", "_tokens")

    def __init__(self, metadata, tokens):
        """
        :param metadata: The metadata of the book in order of appearance.
        :param tokens: The tokens of the book in order of appearance.
        """
        self._metadata = tuple(metadata)
        self._tokens = tuple(tokens)

    @property
    def metadata(self):
        return self._metadata

    @property
    def tokens(self):
        return self._tokens

    def __len__(self):
        return 2

    def __getitem__(self, key):
        if key == 0:
            return self.metadata

        if key == 1:
            return self.tokens
        raise IndexError(f"TokenList accepts key=0,1 only, got: {key}")

    def __iter__(self):
        yield self[0]
        yield self[1]

    def __eq__(self, other):
        if not isinstance(other, TokenList):
            return NotImplemented
        return self.metadata == other.metadata and self.tokens == other.tokens

    def __hash__(self):
        return hash((self.metadata, self.tokens))

    def __copy__(self):
        copied = TokenList.__new__(TokenList)
        copied._metadata = self._metadata
        copied._tokens = self._tokens
        return copied

    def __str__(self):
        return f"TokenList({len(self.metadata)} metadata, {len(self.tokens)} tokens)"

    def __repr__(self):
        return f"TokenList({self.metadata!r}, {self.tokens!r})"
