"""
reset_data.py
-------------
Utility script to clear all stored documents (bookings, cars, users) from the local data.json file.

Usage:
    $ python reset_data.py

After running this script, you can repopulate sample data by executing:
    $ python seeds.py
"""

from carhub.models.store import Store


def main():
    """Clear every document from the persistent store and save it back to disk."""
    store = Store.instance()
    store.clear()
    store.save()

    print("✅ data.json has been successfully cleared.")
    print("💡 Tip: Run `python seeds.py` to regenerate demo data.")


if __name__ == "__main__":
    main()
