"""
Checkbook API operations, generated from the vendor's OpenAPI document
(checkbook-docs 3.0.0). Regenerate rather than edit by hand.

Each entry is ``name: (http method, path template, summary)``.
"""

from typing import Dict, NamedTuple


class Operation(NamedTuple):
    method: str
    path: str
    summary: str


OPERATIONS: Dict[str, Operation] = {
    # Bank accounts
    "get_banks": Operation("get", "/v3/account/bank", "Get bank accounts"),
    "post_bank": Operation("post", "/v3/account/bank", "Add bank account"),
    "post_bank_iav": Operation("post", "/v3/account/bank/iav", "Add bank account with IAV"),
    "post_bank_plaid": Operation("post", "/v3/account/bank/iav/plaid", "Add bank account with Plaid"),
    "get_bank_institutions": Operation("get", "/v3/account/bank/institutions", "Get institutions"),
    "post_bank_release": Operation("post", "/v3/account/bank/release", "Release micro-deposits"),
    "post_bank_verify": Operation("post", "/v3/account/bank/verify", "Verify micro-deposits"),
    "delete_bank": Operation("delete", "/v3/account/bank/{bank_id}", "Remove bank account"),
    "put_bank": Operation("put", "/v3/account/bank/{bank_id}", "Update bank account"),
    # Cards
    "get_cards": Operation("get", "/v3/account/card", "Get cards"),
    "post_card": Operation("post", "/v3/account/card", "Add card"),
    "delete_card": Operation("delete", "/v3/account/card/{card_id}", "Remove card"),
    "put_card": Operation("put", "/v3/account/card/{card_id}", "Update card"),
    # PayPal
    "get_paypal": Operation("get", "/v3/account/paypal", "Get PayPal accounts"),
    "add_paypal": Operation("post", "/v3/account/paypal", "Create PayPal account"),
    "remove_paypal": Operation("delete", "/v3/account/paypal/{paypal_id}", "Remove PayPal account"),
    "put_paypal": Operation("put", "/v3/account/paypal/{paypal_id}", "Update PayPal account"),
    # Virtual cards
    "get_vccs": Operation("get", "/v3/account/vcc", "Get virtual cards"),
    "post_vcc": Operation("post", "/v3/account/vcc", "Create virtual card"),
    "delete_vcc": Operation("delete", "/v3/account/vcc/{vcc_id}", "Remove virtual card"),
    "put_vcc": Operation("put", "/v3/account/vcc/{vcc_id}", "Update virtual card"),
    "get_vcc_transaction": Operation("get", "/v3/account/vcc/{vcc_id}/transaction", "Get virtual card transactions"),
    # Venmo
    "get_venmo": Operation("get", "/v3/account/venmo", "Get Venmo accounts"),
    "add_venmo": Operation("post", "/v3/account/venmo", "Create Venmo account"),
    "remove_venmo": Operation("delete", "/v3/account/venmo/{venmo_id}", "Remove Venmo account"),
    "put_venmo": Operation("put", "/v3/account/venmo/{venmo_id}", "Update Venmo account"),
    # Wallet
    "post_wallet": Operation("post", "/v3/account/wallet", "Create wallet"),
    # Zelle
    "get_zelle": Operation("get", "/v3/account/zelle", "Get Zelle accounts"),
    "add_zelle": Operation("post", "/v3/account/zelle", "Create Zelle account"),
    "put_zelle": Operation("put", "/v3/account/zelle/{account_id}", "Update Zelle account"),
    "remove_zelle": Operation("delete", "/v3/account/zelle/{zelle_id}", "Remove Zelle account"),
    # Approvals
    "get_approval_checks": Operation("get", "/v3/approval", "Get approval payments"),
    "post_approval_digital": Operation("post", "/v3/approval/digital", "Create approval digital payment"),
    "post_approval_multi": Operation("post", "/v3/approval/multi", "Create multi-party payment approval"),
    "post_approval_physical": Operation("post", "/v3/approval/physical", "Create physical check approval"),
    "post_approval_release": Operation("post", "/v3/approval/release", "Approve payment"),
    "delete_approval_check": Operation("delete", "/v3/approval/{lockbox_id}", "Remove payment approval"),
    "get_approval_check": Operation("get", "/v3/approval/{lockbox_id}", "Get payment approval"),
    "put_approval_check": Operation("put", "/v3/approval/{lockbox_id}", "Update payment approval"),
    "get_approval_attachment": Operation("get", "/v3/approval/{lockbox_id}/attachment", "Get attachment for payment approval"),
    # Checks
    "get_checks": Operation("get", "/v3/check", "Get sent/received payments"),
    "post_check_deposit": Operation("post", "/v3/check/deposit/{check_id}", "Deposit a payment"),
    "post_check_digital": Operation("post", "/v3/check/digital", "Create a digital payment"),
    "post_check_endorse": Operation("post", "/v3/check/endorse/{check_id}", "Endorse a multi-party payment"),
    "post_check_multi": Operation("post", "/v3/check/multi", "Create a multi-party payment"),
    "post_check_physical": Operation("post", "/v3/check/physical", "Create a physical check"),
    "post_check_preview": Operation("post", "/v3/check/preview", "Preview payment"),
    "post_check_print": Operation("post", "/v3/check/print/{check_id}", "Print a payment"),
    "post_check_webhook": Operation("put", "/v3/check/webhook/{check_id}", "Trigger a sandbox webhook"),
    "delete_check": Operation("delete", "/v3/check/{check_id}", "Void a payment"),
    "get_check": Operation("get", "/v3/check/{check_id}", "Get payment"),
    "get_check_attachment": Operation("get", "/v3/check/{check_id}/attachment", "Get attachment for a payment"),
    "get_check_deposit": Operation("get", "/v3/check/{check_id}/deposit", "Get deposit details"),
    "get_check_fail": Operation("get", "/v3/check/{check_id}/fail", "Get details on failed payment"),
    "get_check_tracking": Operation("get", "/v3/check/{check_id}/tracking", "Get tracking details on mailed check"),
    # Directory
    "get_directory": Operation("get", "/v3/directory", "Get directory entries"),
    "create_directory": Operation("post", "/v3/directory", "Create a directory entry"),
    "delete_directory": Operation("delete", "/v3/directory/{directory_id}", "Remove a directory entry"),
    "update_directory": Operation("put", "/v3/directory/{directory_id}", "Update a directory entry"),
    "create_directory_bank": Operation("post", "/v3/directory/{directory_id}/account/bank", "Add a bank account to a directory entry"),
    "create_directory_card": Operation("post", "/v3/directory/{directory_id}/account/card", "Add a credit/debit card to a directory entry"),
    "delete_directory_account": Operation("delete", "/v3/directory/{directory_id}/account/{account_id}", "Remove a payment account from a directory entry"),
    # Invoices
    "get_invoices": Operation("get", "/v3/invoice", "Get sent/received invoices"),
    "post_invoice": Operation("post", "/v3/invoice", "Create an invoice"),
    "post_invoice_payment": Operation("post", "/v3/invoice/payment", "Pay an invoice"),
    "delete_invoice": Operation("delete", "/v3/invoice/{invoice_id}", "Void an invoice"),
    "get_invoice": Operation("get", "/v3/invoice/{invoice_id}", "Get invoice"),
    "get_invoice_attachment": Operation("get", "/v3/invoice/{invoice_id}/attachment", "Get attachment for an invoice"),
    # Subscriptions
    "get_subscriptions": Operation("get", "/v3/subscription", "Get subscriptions"),
    "post_subscription_check": Operation("post", "/v3/subscription/check", "Create payment subscription"),
    "post_subscription_invoice": Operation("post", "/v3/subscription/invoice", "Create invoice subscription"),
    "delete_subscription": Operation("delete", "/v3/subscription/{subscription_id}", "Remove subscription"),
    "get_subscription": Operation("get", "/v3/subscription/{subscription_id}", "Get subscription"),
    "put_subscription": Operation("put", "/v3/subscription/{subscription_id}", "Update subscription"),
    # Users and API keys
    "get_user": Operation("get", "/v3/user", "Get user details"),
    "post_user": Operation("post", "/v3/user", "Create user"),
    "put_user": Operation("put", "/v3/user", "Update user"),
    "get_api_keys": Operation("get", "/v3/user/api_key", "Get API keys for user"),
    "new_api_key": Operation("post", "/v3/user/api_key", "Generate new API Key for user"),
    "delete_api_key": Operation("delete", "/v3/user/api_key/{key_id}", "Delete API key for user"),
    "get_users": Operation("get", "/v3/user/list", "Get marketplace users"),
    "post_user_signature": Operation("post", "/v3/user/signature", "Add signature for user"),
    "delete_user": Operation("delete", "/v3/user/{user_id}", "Remove marketplace user"),
}
