# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Authentication handlers.

Everything here is illustrative: signatures are never verified and profiles
are derived from the FID alone, so output is stable for a given input.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ...core.exceptions import UnknownToolInDomainException
from ..params import (
    GenerateAuthFlowParams,
    GetUserProfileParams,
    ImplementSiwfParams,
    ValidateUserParams,
)
from ._utils import CHECK, WARN, bullets, code_block, join_blocks, to_json

SIGNATURE_PREVIEW_LENGTH = 20

# ============================================================================
# farcaster_implement_siwf
# ============================================================================

QUICK_AUTH_CLIENT = """import { sdk } from '@farcaster/miniapp-sdk';

// Quick Auth issues a JWT for the signed-in user; no nonce handling needed
export async function signInWithFarcaster() {
  const { token } = await sdk.quickAuth.getToken();
  return token;
}

// Authenticated request: the bearer token is attached automatically
export async function fetchMe(apiBase: string) {
  const res = await sdk.quickAuth.fetch(`${apiBase}/me`);
  if (!res.ok) throw new Error(`Auth request failed: ${res.status}`);
  return res.json();
}"""

QUICK_AUTH_REACT = """import { useEffect, useState } from 'react';
import { sdk } from '@farcaster/miniapp-sdk';

export function AuthComponent() {
  const [user, setUser] = useState<{ fid: number; username?: string; pfpUrl?: string } | null>(null);
  const [loading, setLoading] = useState(false);

  useEffect(() => {
    sdk.context.then((ctx) => ctx?.user && setUser(ctx.user));
  }, []);

  const handleSignIn = async () => {
    setLoading(true);
    try {
      await sdk.quickAuth.getToken();
      const ctx = await sdk.context;
      setUser(ctx?.user ?? null);
    } catch (error) {
      console.error('Sign in failed:', error);
    } finally {
      setLoading(false);
    }
  };

  if (user) {
    return (
      <div className="auth-container">
        {user.pfpUrl && <img src={user.pfpUrl} alt="" width={40} height={40} />}
        <p>@{user.username ?? user.fid}</p>
      </div>
    );
  }

  return (
    <button onClick={handleSignIn} disabled={loading}>
      {loading ? 'Signing in...' : 'Sign in with Farcaster'}
    </button>
  );
}"""

QUICK_AUTH_BACKENDS = {
    "express": (
        "ts",
        """import express from 'express';
import { createClient, Errors } from '@farcaster/quick-auth';

const client = createClient();
const app = express();
const DOMAIN = process.env.APP_DOMAIN!; // e.g. miniapp.example.com

app.get('/me', async (req, res) => {
  const auth = req.header('Authorization');
  if (!auth?.startsWith('Bearer ')) return res.status(401).json({ error: 'Missing token' });

  try {
    const payload = await client.verifyJwt({ token: auth.slice(7), domain: DOMAIN });
    res.json({ fid: payload.sub });
  } catch (e) {
    if (e instanceof Errors.InvalidTokenError) return res.status(401).json({ error: 'Invalid token' });
    throw e;
  }
});

app.listen(3001);""",
    ),
    "nextjs-api": (
        "ts",
        """// app/api/me/route.ts
import { NextRequest, NextResponse } from 'next/server';
import { createClient, Errors } from '@farcaster/quick-auth';

const client = createClient();

export async function GET(request: NextRequest) {
  const auth = request.headers.get('Authorization');
  if (!auth?.startsWith('Bearer ')) {
    return NextResponse.json({ error: 'Missing token' }, { status: 401 });
  }
  try {
    const payload = await client.verifyJwt({ token: auth.slice(7), domain: process.env.APP_DOMAIN! });
    return NextResponse.json({ fid: payload.sub });
  } catch (e) {
    if (e instanceof Errors.InvalidTokenError) {
      return NextResponse.json({ error: 'Invalid token' }, { status: 401 });
    }
    throw e;
  }
}""",
    ),
    "fastify": (
        "ts",
        """import Fastify from 'fastify';
import { createClient, Errors } from '@farcaster/quick-auth';

const client = createClient();
const app = Fastify();

app.get('/me', async (request, reply) => {
  const auth = request.headers.authorization;
  if (!auth?.startsWith('Bearer ')) return reply.code(401).send({ error: 'Missing token' });
  try {
    const payload = await client.verifyJwt({ token: auth.slice(7), domain: process.env.APP_DOMAIN! });
    return { fid: payload.sub };
  } catch (e) {
    if (e instanceof Errors.InvalidTokenError) return reply.code(401).send({ error: 'Invalid token' });
    throw e;
  }
});

app.listen({ port: 3001 });""",
    ),
}

CUSTOM_SIWF_CLIENT = """import { sdk } from '@farcaster/miniapp-sdk';

export async function signInWithFarcaster(apiBase: string) {
  // 1. Ask the backend for a single-use nonce
  const { nonce } = await fetch(`${apiBase}/auth/nonce`).then((r) => r.json());

  // 2. The host asks the user to sign a SIWF message containing the nonce
  const { message, signature } = await sdk.actions.signIn({ nonce, acceptAuthAddress: true });

  // 3. The backend verifies the signature and starts a session
  const res = await fetch(`${apiBase}/auth/verify`, {
    method: 'POST',
    headers: { 'Content-Type': 'application/json' },
    credentials: 'include',
    body: JSON.stringify({ message, signature, nonce }),
  });
  if (!res.ok) throw new Error('SIWF verification failed');
  return res.json();
}"""

_VERIFY_CORE = """import { createAppClient, viemConnector } from '@farcaster/auth-client';
import { randomBytes } from 'node:crypto';

const appClient = createAppClient({ ethereum: viemConnector() });
const nonces = new Set<string>(); // use a TTL store such as Redis in production

export function issueNonce() {
  const nonce = randomBytes(16).toString('hex');
  nonces.add(nonce);
  return nonce;
}

export async function verifySiwf(message: string, signature: `0x${string}`, nonce: string) {
  if (!nonces.delete(nonce)) throw new Error('Unknown or reused nonce');
  const { success, fid } = await appClient.verifySignInMessage({
    message,
    signature,
    nonce,
    domain: process.env.APP_DOMAIN!,
    acceptAuthAddress: true,
  });
  if (!success) throw new Error('Invalid signature');
  return fid;
}"""

CUSTOM_SIWF_BACKENDS = {
    "express": """import express from 'express';
import { issueNonce, verifySiwf } from './siwf';

const app = express();
app.use(express.json());

app.get('/auth/nonce', (_req, res) => res.json({ nonce: issueNonce() }));

app.post('/auth/verify', async (req, res) => {
  try {
    const fid = await verifySiwf(req.body.message, req.body.signature, req.body.nonce);
    res.cookie('session', String(fid), { httpOnly: true, secure: true, sameSite: 'none' });
    res.json({ fid });
  } catch (e) {
    res.status(401).json({ error: (e as Error).message });
  }
});""",
    "nextjs-api": """// app/api/auth/nonce/route.ts
import { NextResponse } from 'next/server';
import { issueNonce } from '@/lib/siwf';

export function GET() {
  return NextResponse.json({ nonce: issueNonce() });
}

// app/api/auth/verify/route.ts
import { NextRequest, NextResponse } from 'next/server';
import { verifySiwf } from '@/lib/siwf';

export async function POST(request: NextRequest) {
  const { message, signature, nonce } = await request.json();
  try {
    const fid = await verifySiwf(message, signature, nonce);
    const res = NextResponse.json({ fid });
    res.cookies.set('session', String(fid), { httpOnly: true, secure: true, sameSite: 'none' });
    return res;
  } catch (e) {
    return NextResponse.json({ error: (e as Error).message }, { status: 401 });
  }
}""",
    "fastify": """import Fastify from 'fastify';
import { issueNonce, verifySiwf } from './siwf';

const app = Fastify();

app.get('/auth/nonce', async () => ({ nonce: issueNonce() }));

app.post<{ Body: { message: string; signature: `0x${string}`; nonce: string } }>(
  '/auth/verify',
  async (request, reply) => {
    try {
      const fid = await verifySiwf(request.body.message, request.body.signature, request.body.nonce);
      return { fid };
    } catch (e) {
      return reply.code(401).send({ error: (e as Error).message });
    }
  },
);""",
}


def _client_lang(framework: str) -> str:
    return "tsx" if framework in ("react", "next") else "ts"


def _quick_auth(p: ImplementSiwfParams) -> str:
    backend = None
    if p.backend != "none":
        lang, code = QUICK_AUTH_BACKENDS[p.backend]
        backend = f"## Backend Token Verification ({p.backend}):\n" + code_block(lang, code)

    component = None
    if p.framework in ("react", "next"):
        component = "## React Component Example:\n" + code_block("tsx", QUICK_AUTH_REACT)

    benefits = "\n".join(
        f"{CHECK} {item}"
        for item in (
            "Simple integration",
            "No nonce management",
            "Farcaster-hosted authentication",
            "JWT verifiable on any backend",
            "Mobile optimized",
        )
    )
    return join_blocks(
        f"# Quick Auth Implementation ({p.framework})",
        "## Authentication Code:\n" + code_block("ts", QUICK_AUTH_CLIENT),
        component,
        backend,
        f"## Benefits of Quick Auth:\n{benefits}",
    )


def _custom_siwf(p: ImplementSiwfParams) -> str:
    if p.backend == "none":
        server = (
            "## Server Side:\n"
            "SIWF signatures must be verified by a server you control. Choose `express`, "
            "`nextjs-api` or `fastify` as the backend to generate the nonce and verification "
            "routes, or switch to Quick Auth (`useQuickAuth: true`) to avoid running one."
        )
    else:
        server = join_blocks(
            "## Shared Verification Module (siwf.ts):\n" + code_block("ts", _VERIFY_CORE),
            f"## Routes ({p.backend}):\n" + code_block("ts", CUSTOM_SIWF_BACKENDS[p.backend]),
        )

    flow = bullets(
        [
            "Client requests a nonce from the backend",
            "`sdk.actions.signIn({ nonce })` returns the signed SIWF message",
            "Backend verifies message, signature, nonce and domain",
            "Backend issues its own session (cookie or JWT)",
        ]
    )
    return join_blocks(
        f"# Custom Sign In With Farcaster ({p.framework})",
        f"## Flow:\n{flow}",
        f"## Client Code:\n{code_block(_client_lang(p.framework), CUSTOM_SIWF_CLIENT)}",
        server,
        f"## {WARN} Security Notes:\n"
        + bullets(
            [
                "Nonces are single use; delete them on first verification",
                "Pin `domain` to your production host",
                "Set session cookies with `SameSite=None; Secure` because the app runs in an iframe",
            ]
        ),
    )


def implement_siwf(p: ImplementSiwfParams) -> str:
    if p.use_quick_auth:
        return _quick_auth(p)
    return _custom_siwf(p)


# ============================================================================
# farcaster_generate_auth_flow
# ============================================================================

_STORAGE_ADAPTERS = {
    "localStorage": """const storage = {
  get: (key: string) => window.localStorage.getItem(key),
  set: (key: string, value: string) => window.localStorage.setItem(key, value),
  remove: (key: string) => window.localStorage.removeItem(key),
};""",
    "sessionStorage": """const storage = {
  get: (key: string) => window.sessionStorage.getItem(key),
  set: (key: string, value: string) => window.sessionStorage.setItem(key, value),
  remove: (key: string) => window.sessionStorage.removeItem(key),
};""",
    "cookies": """const storage = {
  get: (key: string) => {
    const raw = document.cookie.split('; ').find((c) => c.startsWith(`${key}=`));
    return raw ? decodeURIComponent(raw.slice(key.length + 1)) : null;
  },
  set: (key: string, value: string) => {
    document.cookie = `${key}=${encodeURIComponent(value)}; Path=/; Max-Age=604800; SameSite=None; Secure`;
  },
  remove: (key: string) => {
    document.cookie = `${key}=; Path=/; Max-Age=0; SameSite=None; Secure`;
  },
};""",
    "memory": """const memory = new Map<string, string>();
const storage = {
  get: (key: string) => memory.get(key) ?? null,
  set: (key: string, value: string) => void memory.set(key, value),
  remove: (key: string) => void memory.delete(key),
};""",
}


def _auth_flow_class(p: GenerateAuthFlowParams) -> str:
    adapter = _STORAGE_ADAPTERS[p.session_storage]

    auto = ""
    if p.auto_sign_in:
        auto = """
    const existing = this.getSession();
    if (existing && existing.expiresAt > Date.now()) return existing;
    const ctx = await sdk.context;
    if (ctx?.user) return this.signIn();"""

    profile_field = "\n      profile: await this.fetchProfile(ctx.user.fid)," if p.include_profile else ""
    profile_method = ""
    if p.include_profile:
        profile_method = """

  private async fetchProfile(fid: number) {
    // Replace with your indexer of choice (Neynar, Pinata Hub, your own hub)
    const res = await fetch(`/api/profile/${fid}`);
    return res.ok ? res.json() : null;
  }"""

    return f"""import {{ sdk }} from '@farcaster/miniapp-sdk';

{adapter}

const SESSION_TTL_MS = 7 * 24 * 60 * 60 * 1000;

export class FarcasterAuth {{
  private storageKey = 'farcaster_auth_session';

  async initialize() {{{auto}
    return null;
  }}

  async signIn() {{
    const {{ token }} = await sdk.quickAuth.getToken();
    const ctx = await sdk.context;
    if (!ctx?.user) throw new Error('No Farcaster user in context');

    const session = {{
      token,
      fid: ctx.user.fid,
      username: ctx.user.username,
      displayName: ctx.user.displayName,
      pfpUrl: ctx.user.pfpUrl,{profile_field}
      expiresAt: Date.now() + SESSION_TTL_MS,
    }};
    storage.set(this.storageKey, JSON.stringify(session));
    window.dispatchEvent(new CustomEvent('farcaster:signin', {{ detail: session }}));
    return session;
  }}

  signOut() {{
    storage.remove(this.storageKey);
    window.dispatchEvent(new CustomEvent('farcaster:signout'));
  }}

  getSession() {{
    try {{
      const stored = storage.get(this.storageKey);
      return stored ? JSON.parse(stored) : null;
    }} catch {{
      return null;
    }}
  }}{profile_method}
}}"""


USE_AUTH_HOOK = """import { useEffect, useState } from 'react';
import { FarcasterAuth } from './auth';

const auth = new FarcasterAuth();

export function useAuth() {
  const [user, setUser] = useState<any>(null);
  const [loading, setLoading] = useState(true);

  useEffect(() => {
    auth.initialize().then((session) => {
      setUser(session);
      setLoading(false);
    });

    const onSignIn = (event: Event) => setUser((event as CustomEvent).detail);
    const onSignOut = () => setUser(null);
    window.addEventListener('farcaster:signin', onSignIn);
    window.addEventListener('farcaster:signout', onSignOut);
    return () => {
      window.removeEventListener('farcaster:signin', onSignIn);
      window.removeEventListener('farcaster:signout', onSignOut);
    };
  }, []);

  return { user, loading, signIn: () => auth.signIn(), signOut: () => auth.signOut() };
}"""


def generate_auth_flow(p: GenerateAuthFlowParams) -> str:
    features = [
        "Session persistence" if p.session_storage != "memory" else "In-memory session (cleared on reload)",
        "Automatic expiration",
        "Event-driven updates",
    ]
    if p.include_profile:
        features.append("Profile data integration")
    if p.auto_sign_in:
        features.append("Silent sign-in from host context")

    return join_blocks(
        "# Complete Authentication Flow",
        "\n".join(
            [
                f"## Session Management: {p.session_storage}",
                f"## Auto Sign-in: {'Enabled' if p.auto_sign_in else 'Disabled'}",
                f"## Profile Data: {'Included' if p.include_profile else 'Basic only'}",
            ]
        ),
        "## Implementation (auth.ts):\n" + code_block("ts", _auth_flow_class(p)),
        "## React Hook Integration:\n" + code_block("tsx", USE_AUTH_HOOK),
        "## Features:\n" + "\n".join(f"{CHECK} {item}" for item in features),
    )


# ============================================================================
# farcaster_validate_user / farcaster_get_user_profile
# ============================================================================


def mock_verification_address(fid: int) -> str:
    return "0x" + format(fid, "x").rjust(40, "0")


def mock_profile(fid: int, include_following: bool, include_verifications: bool) -> dict[str, Any]:
    """Deterministic stand-in profile for ``fid``."""
    profile: dict[str, Any] = {
        "fid": fid,
        "username": f"user{fid}",
        "displayName": f"User {fid}",
        "pfpUrl": f"https://api.dicebear.com/7.x/identicon/svg?seed={fid}",
        "bio": "Building cool things on Farcaster",
        "followerCount": 150 + fid % 100,
        "followingCount": 89 + fid % 50,
        "verifications": [mock_verification_address(fid)] if include_verifications else [],
    }
    if include_following:
        profile["following"] = [1, 2, 3, 4, 5]
    return profile


VERIFY_SNIPPET = """import { createAppClient, viemConnector } from '@farcaster/auth-client';

const appClient = createAppClient({ ethereum: viemConnector() });

const { success, fid } = await appClient.verifySignInMessage({
  message,
  signature,
  nonce,
  domain: 'your-app.example.com',
});"""


def validate_user(p: ValidateUserParams) -> str:
    profile = mock_profile(p.fid, include_following=False, include_verifications=True)

    header = [f"## FID: {p.fid}"]
    if p.signature:
        header.append(f"## Signature: {p.signature[:SIGNATURE_PREVIEW_LENGTH]}...")
    if p.message:
        header.append(f"## Message: {p.message}")

    verification = None
    if p.require_verification:
        verification = (
            f"## Verification Status: {CHECK} Verified Address Found\n- {profile['verifications'][0]} (Ethereum)"
        )

    checks = [
        f"{CHECK} Valid Farcaster ID",
        f"{CHECK} Signature verification passed" if p.signature else f"{WARN} No signature supplied",
        f"{CHECK} Message authenticity confirmed" if p.message else f"{WARN} No message supplied",
        f"{CHECK} Verified Ethereum address" if p.require_verification else f"{WARN} No verification required",
    ]

    return join_blocks(
        "# User Validation Results",
        "\n".join(header),
        f"## Validation Status: {CHECK} Valid (Mock)",
        verification,
        "## Profile Summary:\n"
        + bullets(
            [
                f"Username: {profile['username']}",
                f"Display Name: {profile['displayName']}",
                f"Follower Count: {profile['followerCount']}",
                f"Following Count: {profile['followingCount']}",
            ]
        ),
        "## Security Checks:\n" + "\n".join(checks),
        "## Real Verification:\n" + code_block("ts", VERIFY_SNIPPET),
        "Note: This is a mock validation. No signature was checked.",
    )


def get_user_profile(p: GetUserProfileParams) -> str:
    profile = mock_profile(p.fid, p.include_following, p.include_verifications)

    verifications = None
    if p.include_verifications and profile["verifications"]:
        verifications = "## Verified Addresses:\n" + bullets(profile["verifications"])
    following = None
    if p.include_following:
        following = "## Following (Sample):\n" + bullets(f"User {fid}" for fid in profile["following"])

    return join_blocks(
        f"# User Profile: {profile['displayName']}",
        "## Basic Information:\n"
        + bullets(
            [
                f"**FID**: {profile['fid']}",
                f"**Username**: @{profile['username']}",
                f"**Display Name**: {profile['displayName']}",
                f"**Bio**: {profile['bio']}",
            ]
        ),
        f"## Profile Image:\n![Profile]({profile['pfpUrl']})",
        "## Social Stats:\n"
        + bullets([f"**Followers**: {profile['followerCount']}", f"**Following**: {profile['followingCount']}"]),
        verifications,
        following,
        "## JSON Response:\n" + code_block("json", to_json(profile)),
        "Note: This is mock data. In production, read profiles from a hub or an indexer such as Neynar.",
    )


AUTH_HANDLERS: dict[str, Callable[[Any], str]] = {
    "farcaster_implement_siwf": implement_siwf,
    "farcaster_generate_auth_flow": generate_auth_flow,
    "farcaster_validate_user": validate_user,
    "farcaster_get_user_profile": get_user_profile,
}


def handle_auth_tool(name: str, params: Any) -> str:
    """Route an authentication tool to its handler."""
    handler = AUTH_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolInDomainException(name, "auth")
    return handler(params)
