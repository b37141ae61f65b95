"""
In-memory watch store.

Holds the mutable list of watches behind a small interface: brand-ordered
listing, lookup by id and append with sequential id assignment. State lives
for the process lifetime and is reset to the seed set on restart.
"""
import copy
import logging
import threading
from decimal import Decimal
from typing import Iterable, List, Optional

from app.models import Watch

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = 'images/no-picture-Square210.png'


SEED_WATCHES = (
    Watch(id=1, brand='Nomos', model='Club Sport neomatik', price=Decimal('21000'),
          description='Chronograph with minimalist Bauhaus aesthetics.',
          image_url='https://external-content.duckduckgo.com/iu/?u=https%3A%2F%2Fcdn.nomos-glashuette.com%2Fmedia%2Fimage%2F3e%2F72%2F93%2F800xauto-q80-bg238238238%2F0782_club_sport_neomatik_42_datum_blau_front_masked.jpg&f=1&nofb=1&ipt=d88422cf1281e0abf0230d1f4263e49b50bede8f02eeb6d043568ddab1fb74fa',
          release_year=2022, is_available=True, category_id=1),
    Watch(id=2, brand='Frederique Constant', model='Classics Index', price=Decimal('9950'),
          description='Elegant Swiss dress watch.',
          image_url='https://external-content.duckduckgo.com/iu/?u=https%3A%2F%2Ftse2.mm.bing.net%2Fth%3Fid%3DOIP.B2386un1OvR1Ec2p2g--jQHaMF%26pid%3DApi&f=1&ipt=ad89465a5f65775f3d53f229cb89715a42f09c6bcd2507639d4f056a4fcdc48d',
          release_year=2021, is_available=True, category_id=1),
    Watch(id=3, brand='Samsung', model='Galaxy Watch 6', price=Decimal('3990'),
          description='Advanced smartwatch with health tracking.',
          image_url='https://external-content.duckduckgo.com/iu/?u=https%3A%2F%2Fwww.droid-life.com%2Fwp-content%2Fuploads%2F2023%2F06%2FGalaxy-Watch-6-Classic-980x653.jpg&f=1&nofb=1&ipt=cc9a519a34d6c6d636d479ab002c789fd40ada949f76329b37cb586aa3774a79',
          release_year=2023, is_available=True, category_id=3),
    Watch(id=4, brand='Casio', model='G-Shock GA-100', price=Decimal('1200'),
          description='Rugged and durable digital watch.',
          image_url='https://www.casio.com/content/dam/casio/product-info/locales/sg/en/timepiece/product/watch/G/GA/GA1/GA-100CB-1A/assets/GA-100CB-1A_Seq1.png',
          release_year=2020, is_available=True, category_id=2),
    Watch(id=5, brand='Seiko', model='Presage Cocktail Time', price=Decimal('4500'),
          description='Elegant dress watch.',
          image_url='https://external-content.duckduckgo.com/iu/?u=https%3A%2F%2Fwww.watchnation.com%2Fwp-content%2Fuploads%2F2022%2F06%2Fimage340392944.jpg&f=1&nofb=1&ipt=81cfa6b88e812e924502fc6ae0c7a9433c4e8bc025a32d9d0ea1879ff083ac90',
          release_year=2019, is_available=False, category_id=1),
    Watch(id=6, brand='Tissot', model='PRX Powermatic 80', price=Decimal('6500'),
          description='Automatic watch with 80-hour power reserve.',
          image_url='https://external-content.duckduckgo.com/iu/?u=https%3A%2F%2Fi.ytimg.com%2Fvi%2FQ7HYiWk--As%2Fmaxresdefault.jpg&f=1&nofb=1&ipt=2c07a850b270ef7b8797cc9907163f1f76db205f82429c52fbac5fda69d3c321',
          release_year=2021, is_available=True, category_id=1),
    Watch(id=7, brand='Junghans', model='Max Bill Automatic', price=Decimal('11000'),
          description='Iconic Bauhaus-inspired watch.',
          image_url='https://external-content.duckduckgo.com/iu/?u=https%3A%2F%2Fimages.watchfinder.co.uk%2Fimages%2Fwatchfinderimages%2Fmedia%2Farticles%2F0%2F2022%2F04%2F19%2FJunghans-2.jpg&f=1&nofb=1&ipt=a8435b8d1c41ef69c52d7ee3805e5e2bac766561f99594c418ae88b98977d6fa',
          release_year=2022, is_available=True, category_id=1),
    Watch(id=8, brand='Tag Heuer', model='Carrera', price=Decimal('32000'),
          description='Luxury sports chronograph.',
          image_url='https://external-content.duckduckgo.com/iu/?u=https%3A%2F%2Fmagazine.chrono24.com%2Fcdn-cgi%2Fimage%2Ff%3Dauto%2Cmetadata%3Dnone%2Cq%3D65%2F2023%2F06%2FHigh-Quality-JPG-CloseUp-2_V2_1-1-1-original.jpeg&f=1&nofb=1&ipt=35579b76e09f6da24a4c2e436bf5ab82bcb2e687b38ef79fc1d68f8dd8b27abc',
          release_year=2021, is_available=True, category_id=1),
    Watch(id=9, brand='Garmin', model='Fenix 7', price=Decimal('6990'),
          description='GPS multi-sport smartwatch.',
          image_url='https://external-content.duckduckgo.com/iu/?u=https%3A%2F%2Fwww.garmin.co.kr%2Fm%2Fkr%2Fg%2Fproducts%2Ffenix-7-solar-gray-cf-lg.jpg&f=1&nofb=1&ipt=5bc1ebebd1ef4ca31ef67215a38856b7cc11905867075ec558d94fe677ebc762',
          release_year=2023, is_available=True, category_id=3),
    Watch(id=10, brand='Citizen', model='Eco-Drive Chronograph', price=Decimal('3750'),
          description='Solar-powered chronograph.',
          image_url='https://external-content.duckduckgo.com/iu/?u=https%3A%2F%2Fi5.walmartimages.com%2Fasr%2Fec25b544-ae3a-4822-a85c-59eff685ca45.647bbaedc7c2296bc115f1a3c4f14060.jpeg%3FodnWidth%3D1000%26odnHeight%3D1000%26odnBg%3Dffffff&f=1&nofb=1&ipt=f6ea445cfc3dd2583563aae7a80356d47d579425c6ab10c1f7bf9e2c1fec27bd',
          release_year=2020, is_available=False, category_id=1),
)


class WatchStore:
    """
    Owner of the in-memory watch list.

    Usage:
        store = WatchStore()
        store.add(Watch(brand='Omega', model='Seamaster', price=Decimal('5000')))
        store.list_all()
    """

    def __init__(self, watches: Optional[Iterable[Watch]] = None,
                 placeholder_image: str = PLACEHOLDER_IMAGE):
        if watches is None:
            # Seed records are copied so each store owns its own instances
            watches = copy.deepcopy(SEED_WATCHES)
        self._watches: List[Watch] = list(watches)
        self._placeholder_image = placeholder_image
        self._lock = threading.Lock()

    def _next_id(self) -> int:
        if not self._watches:
            return 1
        return max(w.id for w in self._watches) + 1

    def list_all(self) -> List[Watch]:
        """
        Return all watches ordered by brand.

        The underlying list is re-sorted in place (stable, so equal brands
        keep insertion order); membership never changes.
        """
        with self._lock:
            self._watches.sort(key=lambda w: w.brand)
            return list(self._watches)

    def get_by_id(self, watch_id: int) -> Optional[Watch]:
        """Return the watch with ``watch_id`` or None."""
        with self._lock:
            for watch in self._watches:
                if watch.id == watch_id:
                    return watch
        return None

    def add(self, watch: Watch) -> Watch:
        """
        Append a watch to the store.

        Side effects on ``watch``:
            - ``id`` is replaced by max(existing ids) + 1, or 1 when empty
            - an empty ``image_url`` becomes the placeholder image path
        """
        with self._lock:
            watch.id = self._next_id()
            if not watch.image_url:
                watch.image_url = self._placeholder_image
            self._watches.append(watch)

        logger.debug(f"[WATCHES] Stored watch {watch.id}: {watch.brand} {watch.model}")
        return watch

    def count(self) -> int:
        with self._lock:
            return len(self._watches)
