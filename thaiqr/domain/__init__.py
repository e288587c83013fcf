from thaiqr.domain.models import (
    API_AID,
    BILL_PAYMENT_AID,
    COUNTRY_CODE_TH,
    CURRENCY_CODE_THB,
    PROMPTPAY_AID,
    AdditionalData,
    Merchant,
    MerchantIdentifier,
    PaymentQRCode,
    PromptPay,
    PromptPayAPI,
    PromptPayBillPayment,
    Transaction,
)

__all__ = [
    "API_AID",
    "BILL_PAYMENT_AID",
    "COUNTRY_CODE_TH",
    "CURRENCY_CODE_THB",
    "PROMPTPAY_AID",
    "AdditionalData",
    "Merchant",
    "MerchantIdentifier",
    "PaymentQRCode",
    "PromptPay",
    "PromptPayAPI",
    "PromptPayBillPayment",
    "Transaction",
]
