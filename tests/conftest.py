from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_COLLECTION = """\
version: 3
description: My collection
modifiedAt: "2020-04-18 10:30:00"
elements:
  - brand: ACME
    itemNumber: "60131"
    description: Locomotiva elettrica E 656 077 nella livrea d'origine
    powerMethod: DC
    scale: H0
    count: 1
    rollingStocks:
      - typeName: E 656
        roadNumber: E 656 077
        series: I serie
        railway: FS
        epoch: IV
        category: LOCOMOTIVE
        subCategory: ELECTRIC_LOCOMOTIVE
        livery: castano/isabella
        control: DCC
        dccInterface: NEXT_18
    purchaseInfo:
      date: "2005-03-12"
      price: "50,00"
      shop: Negozio A
  - brand: Roco
    itemNumber: "45012"
    description: Carrozza Tipo 1959 2cl
    powerMethod: DC
    scale: H0
    count: 1
    rollingStocks:
      - typeName: Tipo 1959
        railway: FS
        epoch: IV
        category: PASSENGER_CAR
    purchaseInfo:
      date: "2005-07-01"
      price: "20.00"
      shop: Negozio B
  - brand: ACME
    itemNumber: "69013"
    description: Locomotive D 445
    powerMethod: DC
    scale: H0
    count: 2
    rollingStocks:
      - typeName: D 445
        roadNumber: D 445 1145
        railway: FS
        epoch: IV
        category: LOCOMOTIVE
        subCategory: DIESEL_LOCOMOTIVE
        control: DCC_READY
        dccInterface: NEM_652
    purchaseInfo:
      date: "2006-11-20"
      price: "99999.99 EUR"
      shop: Negozio A
"""


@pytest.fixture()
def collection_path(tmp_path: Path) -> Path:
    path = tmp_path / "collection.yaml"
    path.write_text(SAMPLE_COLLECTION, encoding="utf-8")
    return path
