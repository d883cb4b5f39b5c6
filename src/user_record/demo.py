"""Walk through copy and reference semantics on a person record."""

from user_record.config import settings
from user_record.errors import InvalidInputError
from user_record.logging_setup import setup_logging
from user_record.models import SealedUser, new_user


def main() -> int:
    setup_logging(settings.log_level)

    print("=" * 60)
    print("Person record: copies vs shared references")
    print("=" * 60)

    app_user = new_user("Ann", "Lee", "2000-01-01")

    print("\nPresenting through a copy and through the record itself:")
    app_user.output_user_details()
    app_user.output_user_details_ref()

    print("\nClearing a copy (the record keeps its values):")
    app_user.clear_user_name()
    app_user.output_user_details_ref()

    print("\nClearing through the record itself:")
    app_user.clear_user_name_ref()
    app_user.output_user_details_ref()

    print("\nFactory with an empty first name:")
    try:
        new_user("", "Lee", "2000-01-01")
    except InvalidInputError as e:
        print(f"   rejected: {e} ({', '.join(e.fields)})")

    print("\nSealed record with private fields:")
    sealed = SealedUser.create("Ann", "Lee", "2000-01-01")
    sealed.output_user_details_ref()
    try:
        sealed.first_name = "Bob"
    except AttributeError:
        print("   first_name is read-only")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
