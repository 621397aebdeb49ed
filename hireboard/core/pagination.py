from rest_framework.pagination import LimitOffsetPagination, _positive_int


class LimitZeroNoResultsPagination(LimitOffsetPagination):
    """
    `?limit=0` returns an empty page with the count only, which the board
    uses for column totals.
    """

    def get_limit(self, request):
        if self.limit_query_param:
            try:
                return _positive_int(
                    request.query_params[self.limit_query_param],
                    strict=False,
                    cutoff=self.max_limit
                )
            except (KeyError, ValueError):
                pass

        return self.default_limit
