import django_filters

from modules.feed.models import FeedLog


class FeedLogFilter(django_filters.FilterSet):
    cow = django_filters.UUIDFilter(field_name="cow_id")
    date = django_filters.DateFilter(field_name="date")
    start_date = django_filters.DateFilter(field_name="date", lookup_expr="gte")
    end_date = django_filters.DateFilter(field_name="date", lookup_expr="lte")

    class Meta:
        model = FeedLog
        fields = ["cow", "date", "start_date", "end_date"]
