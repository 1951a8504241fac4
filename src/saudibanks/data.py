from __future__ import annotations

from typing import Tuple

from saudibanks.bank import Bank

# Core dataset, authored order. Identifier = the two digits at positions 5-6 of a Saudi IBAN.
# Inactive rows belong to merged banks; legacy IBANs may still carry their code.
BANKS: Tuple[Bank, ...] = (
    Bank(
        identifier="05",
        english_name="Alinma Bank",
        arabic_name="مصرف الإنماء",
        short_code="ALINMA",
        notes="Sometimes machine-translated as “Development Bank”.",
    ),
    Bank(
        identifier="10",
        english_name="Saudi National Bank (SNB)",
        arabic_name="البنك الأهلي السعودي",
        short_code="SNB",
        notes="Formerly National Commercial Bank (NCB).",
    ),
    Bank(
        identifier="15",
        english_name="Bank Albilad",
        arabic_name="بنك البلاد",
        short_code="ALBILAD",
    ),
    Bank(
        identifier="20",
        english_name="Riyad Bank",
        arabic_name="بنك الرياض",
        short_code="RIYAD",
    ),
    Bank(
        identifier="30",
        english_name="Arab National Bank",
        arabic_name="البنك العربي الوطني",
        short_code="ANB",
    ),
    Bank(
        identifier="40",
        english_name="Samba Financial Group",
        arabic_name="مجموعة سامبا المالية",
        short_code="SAMBA",
        active=False,
        notes="Merged into SNB; legacy IBANs may still contain this code.",
    ),
    Bank(
        identifier="45",
        english_name="Saudi British Bank (SABB)",
        arabic_name="البنك السعودي البريطاني",
        short_code="SABB",
    ),
    Bank(
        identifier="50",
        english_name="Alawwal Bank",
        arabic_name="البنك الأول",
        short_code="ALAWAL",
        active=False,
        notes="Merged into SABB; keep for legacy IBANs.",
    ),
    Bank(
        identifier="55",
        english_name="Banque Saudi Fransi",
        arabic_name="البنك السعودي الفرنسي",
        short_code="BSF",
    ),
    Bank(
        identifier="60",
        english_name="Bank AlJazira",
        arabic_name="بنك الجزيرة",
        short_code="BJAZ",
    ),
    Bank(
        identifier="65",
        english_name="The Saudi Investment Bank",
        arabic_name="البنك السعودي للاستثمار",
        short_code="SAIB",
    ),
    Bank(
        identifier="71",
        english_name="National Bank of Bahrain (Saudi Branch)",
        arabic_name="بنك البحرين الوطني",
        short_code="NBB",
    ),
    Bank(
        identifier="75",
        english_name="National Bank of Kuwait (Saudi Branch)",
        arabic_name="بنك الكويت الوطني",
        short_code="NBK",
    ),
    Bank(
        identifier="76",
        english_name="Bank Muscat (Saudi Branch)",
        arabic_name="بنك مسقط",
        short_code="BMUSCAT",
    ),
    Bank(
        identifier="80",
        english_name="Al Rajhi Bank",
        arabic_name="مصرف الراجحي",
        short_code="RAJHI",
    ),
    Bank(
        identifier="81",
        english_name="Deutsche Bank (Saudi Branch)",
        arabic_name="دويتشه بنك",
        short_code="DEUTSCHE",
    ),
    Bank(
        identifier="82",
        english_name="National Bank of Pakistan (Saudi Branch)",
        arabic_name="البنك الوطني الباكستاني",
        short_code="NBP",
    ),
    Bank(
        identifier="84",
        english_name="Ziraat Bankası (Saudi Branch)",
        arabic_name="بنك زراعات التركي",
        short_code="ZIRAAT",
    ),
    Bank(
        identifier="85",
        english_name="BNP Paribas (Saudi Branch)",
        arabic_name="بي إن بي باريبا",
        short_code="BNP",
    ),
    Bank(
        identifier="86",
        english_name="JPMorgan Chase Bank (Saudi Branch)",
        arabic_name="جي بي مورغان تشيس بنك",
        short_code="JPM",
    ),
    Bank(
        identifier="90",
        english_name="Gulf International Bank",
        arabic_name="بنك الخليج الدولي",
        short_code="GIB",
    ),
    Bank(
        identifier="95",
        english_name="Emirates NBD (Emirates Bank International)",
        arabic_name="بنك الإمارات دبي الوطني",
        short_code="ENBD",
    ),
)
